"""Subtype vocabularies, one enumeration per subtype category.

Each category knows which card types it may appear with. A subtype is any
member of one of the category enumerations below.
"""

from typing import FrozenSet, Tuple, Type, Union

from .card_types import CardType
from .vocabulary import Vocabulary


class SubtypeCategory(Vocabulary):
    """Base for subtype categories.

    Validity is decided per category: every member of a category is valid
    for the same set of card types.
    """

    @property
    def valid_types(self) -> FrozenSet[CardType]:
        return _VALID_TYPES[type(self)]

    def valid_for(self, card_type: CardType) -> bool:
        """Check whether this subtype may appear alongside ``card_type``."""
        return card_type in self.valid_types


class ArtifactType(SubtypeCategory):
    """Artifact subtypes (CR 205.3g)."""

    CLUE = "Clue"
    CONTRAPTION = "Contraption"
    EQUIPMENT = "Equipment"
    FORTIFICATION = "Fortification"
    TREASURE = "Treasure"
    VEHICLE = "Vehicle"


class EnchantmentType(SubtypeCategory):
    """Enchantment subtypes (CR 205.3h)."""

    AURA = "Aura"
    CARTOUCHE = "Cartouche"
    CURSE = "Curse"
    SAGA = "Saga"
    SHRINE = "Shrine"


class LandType(SubtypeCategory):
    """Land subtypes (CR 205.3i)."""

    DESERT = "Desert"
    FOREST = "Forest"
    GATE = "Gate"
    ISLAND = "Island"
    LAIR = "Lair"
    LOCUS = "Locus"
    MINE = "Mine"
    MOUNTAIN = "Mountain"
    PLAINS = "Plains"
    POWER_PLANT = "Power-Plant"
    SWAMP = "Swamp"
    TOWER = "Tower"
    URZAS = "Urza's"


class PlaneswalkerType(SubtypeCategory):
    """Planeswalker subtypes (CR 205.3j)."""

    AJANI = "Ajani"
    AMINATOU = "Aminatou"
    ANGRATH = "Angrath"
    ARLINN = "Arlinn"
    ASHIOK = "Ashiok"
    BOLAS = "Bolas"
    CHANDRA = "Chandra"
    DACK = "Dack"
    DARETTI = "Daretti"
    DOMRI = "Domri"
    DOVIN = "Dovin"
    ELSPETH = "Elspeth"
    ESTRID = "Estrid"
    FREYALISE = "Freyalise"
    GARRUK = "Garruk"
    GIDEON = "Gideon"
    HUATLI = "Huatli"
    JACE = "Jace"
    JAYA = "Jaya"
    KARN = "Karn"
    KAYA = "Kaya"
    KIORA = "Kiora"
    KOTH = "Koth"
    LILIANA = "Liliana"
    NAHIRI = "Nahiri"
    NARSET = "Narset"
    NISSA = "Nissa"
    NIXILIS = "Nixilis"
    RAL = "Ral"
    ROWAN = "Rowan"
    SAHEELI = "Saheeli"
    SAMUT = "Samut"
    SARKHAN = "Sarkhan"
    SORIN = "Sorin"
    TAMIYO = "Tamiyo"
    TEFERI = "Teferi"
    TEZZERET = "Tezzeret"
    TIBALT = "Tibalt"
    UGIN = "Ugin"
    VENSER = "Venser"
    VIVIEN = "Vivien"
    VRASKA = "Vraska"
    WILL = "Will"
    WINDGRACE = "Windgrace"
    XENAGOS = "Xenagos"
    YANGGU = "Yanggu"
    YANLING = "Yanling"


class SpellType(SubtypeCategory):
    """Instant and sorcery subtypes (CR 205.3k)."""

    ARCANE = "Arcane"
    TRAP = "Trap"


class CreatureType(SubtypeCategory):
    """Creature and tribal subtypes (CR 205.3m)."""

    ADVISOR = "Advisor"
    AETHERBORN = "Aetherborn"
    ALLY = "Ally"
    ANGEL = "Angel"
    ANTELOPE = "Antelope"
    APE = "Ape"
    ARCHER = "Archer"
    ARCHON = "Archon"
    ARTIFICER = "Artificer"
    ASSASSIN = "Assassin"
    ASSEMBLY_WORKER = "Assembly-Worker"
    ATOG = "Atog"
    AUROCHS = "Aurochs"
    AVATAR = "Avatar"
    AZRA = "Azra"
    BADGER = "Badger"
    BARBARIAN = "Barbarian"
    BASILISK = "Basilisk"
    BAT = "Bat"
    BEAR = "Bear"
    BEAST = "Beast"
    BEEBLE = "Beeble"
    BERSERKER = "Berserker"
    BIRD = "Bird"
    BLINKMOTH = "Blinkmoth"
    BOAR = "Boar"
    BRINGER = "Bringer"
    BRUSHWAGG = "Brushwagg"
    CAMARID = "Camarid"
    CAMEL = "Camel"
    CARIBOU = "Caribou"
    CARRIER = "Carrier"
    CAT = "Cat"
    CENTAUR = "Centaur"
    CEPHALID = "Cephalid"
    CHIMERA = "Chimera"
    CITIZEN = "Citizen"
    CLERIC = "Cleric"
    COCKATRICE = "Cockatrice"
    CONSTRUCT = "Construct"
    COWARD = "Coward"
    CRAB = "Crab"
    CROCODILE = "Crocodile"
    CYCLOPS = "Cyclops"
    DAUTHI = "Dauthi"
    DEMON = "Demon"
    DESERTER = "Deserter"
    DEVIL = "Devil"
    DINOSAUR = "Dinosaur"
    DJINN = "Djinn"
    DRAGON = "Dragon"
    DRAKE = "Drake"
    DREADNOUGHT = "Dreadnought"
    DRONE = "Drone"
    DRUID = "Druid"
    DRYAD = "Dryad"
    DWARF = "Dwarf"
    EFREET = "Efreet"
    EGG = "Egg"
    ELDER = "Elder"
    ELDRAZI = "Eldrazi"
    ELEMENTAL = "Elemental"
    ELEPHANT = "Elephant"
    ELF = "Elf"
    ELK = "Elk"
    EYE = "Eye"
    FAERIE = "Faerie"
    FERRET = "Ferret"
    FISH = "Fish"
    FLAGBEARER = "Flagbearer"
    FOX = "Fox"
    FROG = "Frog"
    FUNGUS = "Fungus"
    GARGOYLE = "Gargoyle"
    GERM = "Germ"
    GIANT = "Giant"
    GNOME = "Gnome"
    GOAT = "Goat"
    GOBLIN = "Goblin"
    GOD = "God"
    GOLEM = "Golem"
    GORGON = "Gorgon"
    GRAVEBORN = "Graveborn"
    GREMLIN = "Gremlin"
    GRIFFIN = "Griffin"
    HAG = "Hag"
    HARPY = "Harpy"
    HELLION = "Hellion"
    HIPPO = "Hippo"
    HIPPOGRIFF = "Hippogriff"
    HOMARID = "Homarid"
    HOMUNCULUS = "Homunculus"
    HORROR = "Horror"
    HORSE = "Horse"
    HOUND = "Hound"
    HUMAN = "Human"
    HYDRA = "Hydra"
    HYENA = "Hyena"
    ILLUSION = "Illusion"
    IMP = "Imp"
    INCARNATION = "Incarnation"
    INSECT = "Insect"
    JACKAL = "Jackal"
    JELLYFISH = "Jellyfish"
    JUGGERNAUT = "Juggernaut"
    KAVU = "Kavu"
    KIRIN = "Kirin"
    KITHKIN = "Kithkin"
    KNIGHT = "Knight"
    KOBOLD = "Kobold"
    KOR = "Kor"
    KRAKEN = "Kraken"
    LAMIA = "Lamia"
    LAMMASU = "Lammasu"
    LEECH = "Leech"
    LEVIATHAN = "Leviathan"
    LHURGOYF = "Lhurgoyf"
    LICID = "Licid"
    LIZARD = "Lizard"
    MANTICORE = "Manticore"
    MASTICORE = "Masticore"
    MERCENARY = "Mercenary"
    MERFOLK = "Merfolk"
    METATHRAN = "Metathran"
    MINION = "Minion"
    MINOTAUR = "Minotaur"
    MOLE = "Mole"
    MONGER = "Monger"
    MONGOOSE = "Mongoose"
    MONK = "Monk"
    MONKEY = "Monkey"
    MOONFOLK = "Moonfolk"
    MUTANT = "Mutant"
    MYR = "Myr"
    MYSTIC = "Mystic"
    NAGA = "Naga"
    NAUTILUS = "Nautilus"
    NEPHILIM = "Nephilim"
    NIGHTMARE = "Nightmare"
    NIGHTSTALKER = "Nightstalker"
    NINJA = "Ninja"
    NOGGLE = "Noggle"
    NOMAD = "Nomad"
    NYMPH = "Nymph"
    OCTOPUS = "Octopus"
    OGRE = "Ogre"
    OOZE = "Ooze"
    ORB = "Orb"
    ORC = "Orc"
    ORGG = "Orgg"
    OUPHE = "Ouphe"
    OX = "Ox"
    OYSTER = "Oyster"
    PANGOLIN = "Pangolin"
    PEGASUS = "Pegasus"
    PENTAVITE = "Pentavite"
    PEST = "Pest"
    PHELDDAGRIF = "Phelddagrif"
    PHOENIX = "Phoenix"
    PILOT = "Pilot"
    PINCHER = "Pincher"
    PIRATE = "Pirate"
    PLANT = "Plant"
    PRAETOR = "Praetor"
    PRISM = "Prism"
    PROCESSOR = "Processor"
    RABBIT = "Rabbit"
    RAT = "Rat"
    REBEL = "Rebel"
    REFLECTION = "Reflection"
    RHINO = "Rhino"
    RIGGER = "Rigger"
    ROGUE = "Rogue"
    SABLE = "Sable"
    SALAMANDER = "Salamander"
    SAMURAI = "Samurai"
    SAND = "Sand"
    SAPROLING = "Saproling"
    SATYR = "Satyr"
    SCARECROW = "Scarecrow"
    SCION = "Scion"
    SCORPION = "Scorpion"
    SCOUT = "Scout"
    SERF = "Serf"
    SERPENT = "Serpent"
    SERVO = "Servo"
    SHADE = "Shade"
    SHAMAN = "Shaman"
    SHAPESHIFTER = "Shapeshifter"
    SHEEP = "Sheep"
    SIREN = "Siren"
    SKELETON = "Skeleton"
    SLITH = "Slith"
    SLIVER = "Sliver"
    SLUG = "Slug"
    SNAKE = "Snake"
    SOLDIER = "Soldier"
    SOLTARI = "Soltari"
    SPAWN = "Spawn"
    SPECTER = "Specter"
    SPELLSHAPER = "Spellshaper"
    SPHINX = "Sphinx"
    SPIDER = "Spider"
    SPIKE = "Spike"
    SPIRIT = "Spirit"
    SPLINTER = "Splinter"
    SPONGE = "Sponge"
    SQUID = "Squid"
    SQUIRREL = "Squirrel"
    STARFISH = "Starfish"
    SURRAKAR = "Surrakar"
    SURVIVOR = "Survivor"
    TETRAVITE = "Tetravite"
    THALAKOS = "Thalakos"
    THOPTER = "Thopter"
    THRULL = "Thrull"
    TREEFOLK = "Treefolk"
    TRILOBITE = "Trilobite"
    TRISKELAVITE = "Triskelavite"
    TROLL = "Troll"
    TURTLE = "Turtle"
    UNICORN = "Unicorn"
    VAMPIRE = "Vampire"
    VEDALKEN = "Vedalken"
    VIASHINO = "Viashino"
    VOLVER = "Volver"
    WALL = "Wall"
    WARRIOR = "Warrior"
    WEIRD = "Weird"
    WEREWOLF = "Werewolf"
    WHALE = "Whale"
    WIZARD = "Wizard"
    WOLF = "Wolf"
    WOLVERINE = "Wolverine"
    WOMBAT = "Wombat"
    WORM = "Worm"
    WRAITH = "Wraith"
    WURM = "Wurm"
    YETI = "Yeti"
    ZOMBIE = "Zombie"
    ZUBERA = "Zubera"


class PlanarType(SubtypeCategory):
    """Plane subtypes (CR 205.3n)."""

    ALARA = "Alara"
    ARKHOS = "Arkhos"
    AZGOL = "Azgol"
    BELENON = "Belenon"
    BOLAS_MEDITATION_REALM = "Bolas's Meditation Realm"
    DOMINARIA = "Dominaria"
    EQUILOR = "Equilor"
    ERGAMON = "Ergamon"
    FABACIN = "Fabacin"
    INNISTRAD = "Innistrad"
    IQUATANA = "Iquatana"
    IR = "Ir"
    KALDHEIM = "Kaldheim"
    KAMIGAWA = "Kamigawa"
    KARSUS = "Karsus"
    KEPHALAI = "Kephalai"
    KINSHALA = "Kinshala"
    KOLBAHAN = "Kolbahan"
    KYNETH = "Kyneth"
    LORWYN = "Lorwyn"
    LUVION = "Luvion"
    MERCADIA = "Mercadia"
    MIRRODIN = "Mirrodin"
    MOAG = "Moag"
    MONGSENG = "Mongseng"
    MURAGANDA = "Muraganda"
    NEW_PHYREXIA = "New Phyrexia"
    PHYREXIA = "Phyrexia"
    PYRULEA = "Pyrulea"
    RABIAH = "Rabiah"
    RATH = "Rath"
    RAVNICA = "Ravnica"
    REGATHA = "Regatha"
    SEGOVIA = "Segovia"
    SERRAS_REALM = "Serra's Realm"
    SHADOWMOOR = "Shadowmoor"
    SHANDALAR = "Shandalar"
    ULGROTHA = "Ulgrotha"
    VALLA = "Valla"
    VRYN = "Vryn"
    WILDFIRE = "Wildfire"
    XEREX = "Xerex"
    ZENDIKAR = "Zendikar"


Subtype = Union[
    ArtifactType,
    EnchantmentType,
    LandType,
    PlaneswalkerType,
    SpellType,
    CreatureType,
    PlanarType,
]

# Lookup order when a name is parsed without knowing its category.
SUBTYPE_CATEGORIES: Tuple[Type[SubtypeCategory], ...] = (
    ArtifactType,
    EnchantmentType,
    LandType,
    PlaneswalkerType,
    SpellType,
    CreatureType,
    PlanarType,
)

_VALID_TYPES = {
    ArtifactType: frozenset({CardType.ARTIFACT}),
    EnchantmentType: frozenset({CardType.ENCHANTMENT}),
    LandType: frozenset({CardType.LAND}),
    PlaneswalkerType: frozenset({CardType.PLANESWALKER}),
    SpellType: frozenset({CardType.INSTANT, CardType.SORCERY}),
    CreatureType: frozenset({CardType.CREATURE, CardType.TRIBAL}),
    PlanarType: frozenset({CardType.PLANE}),
}


def parse_subtype(value: str) -> Subtype:
    """Parse a subtype name of any category.

    Raises:
        ValueError: if no category knows the name.
    """
    for category in SUBTYPE_CATEGORIES:
        try:
            return category(value)
        except ValueError:
            continue
    raise ValueError(f"Invalid subtype: {value!r}")


def is_subtype(value: object) -> bool:
    return isinstance(value, SUBTYPE_CATEGORIES)
