"""
Caste-level tokens.
"""

from enum import Enum

from .table import build_token_map


class CasteTag(Enum):
    """Tokens that apply to the selected caste(s) of a creature."""

    ADOPTS_OWNER = "ADOPTS_OWNER"
    ALCOHOL_DEPENDENT = "ALCOHOL_DEPENDENT"
    ALL_ACTIVE = "ALL_ACTIVE"
    AMBUSHPREDATOR = "AMBUSHPREDATOR"
    AMPHIBIOUS = "AMPHIBIOUS"
    APPLY_CURRENT_CREATURE_VARIATION = "APPLY_CURRENT_CREATURE_VARIATION"
    AQUATIC = "AQUATIC"
    ARENA_RESTRICTED = "ARENA_RESTRICTED"
    AT_PEACE_WITH_WILDLIFE = "AT_PEACE_WITH_WILDLIFE"
    ATTACK = "ATTACK"
    ATTACK_FLAG_CANLATCH = "ATTACK_FLAG_CANLATCH"
    ATTACK_FLAG_WITH = "ATTACK_FLAG_WITH"
    ATTACK_PREPARE_AND_RECOVER = "ATTACK_PREPARE_AND_RECOVER"
    ATTACK_PRIORITY = "ATTACK_PRIORITY"
    ATTACK_SKILL = "ATTACK_SKILL"
    ATTACK_CONTACT_PERC = "ATTACK_CONTACT_PERC"
    ATTACK_PENETRATION_PERC = "ATTACK_PENETRATION_PERC"
    ATTACK_VELOCITY_MODIFIER = "ATTACK_VELOCITY_MODIFIER"
    ATTACK_SPECIALATTACK_INJECT_EXTRACT = "ATTACK_SPECIALATTACK_INJECT_EXTRACT"
    ATTACK_TRIGGER = "ATTACK_TRIGGER"
    BABY = "BABY"
    BABYNAME = "BABYNAME"
    BEACH_FREQUENCY = "BEACH_FREQUENCY"
    BENIGN = "BENIGN"
    BLOOD = "BLOOD"
    BLOODSUCKER = "BLOODSUCKER"
    BODY = "BODY"
    BODY_APPEARANCE_MODIFIER = "BODY_APPEARANCE_MODIFIER"
    BODY_DETAIL_PLAN = "BODY_DETAIL_PLAN"
    BODY_SIZE = "BODY_SIZE"
    BODYGLOSS = "BODYGLOSS"
    BONECARN = "BONECARN"
    BP_ADD_TYPE = "BP_ADD_TYPE"
    BP_APPEARANCE_MODIFIER = "BP_APPEARANCE_MODIFIER"
    BP_REMOVE_TYPE = "BP_REMOVE_TYPE"
    BUILDINGDESTROYER = "BUILDINGDESTROYER"
    CAN_DO_INTERACTION = "CAN_DO_INTERACTION"
    CAN_LEARN = "CAN_LEARN"
    CAN_SPEAK = "CAN_SPEAK"
    CANNOT_CLIMB = "CANNOT_CLIMB"
    CANNOT_JUMP = "CANNOT_JUMP"
    CANNOT_UNDEAD = "CANNOT_UNDEAD"
    CANOPENDOORS = "CANOPENDOORS"
    CARNIVORE = "CARNIVORE"
    CASTE_ALTTILE = "CASTE_ALTTILE"
    CASTE_COLOR = "CASTE_COLOR"
    CASTE_GLOWCOLOR = "CASTE_GLOWCOLOR"
    CASTE_GLOWTILE = "CASTE_GLOWTILE"
    CASTE_NAME = "CASTE_NAME"
    CASTE_PROFESSION_NAME = "CASTE_PROFESSION_NAME"
    CASTE_SOLDIER_ALTTILE = "CASTE_SOLDIER_ALTTILE"
    CASTE_SOLDIER_TILE = "CASTE_SOLDIER_TILE"
    CASTE_TILE = "CASTE_TILE"
    CAVE_ADAPT = "CAVE_ADAPT"
    CDI = "CDI"
    CHANGE_BODY_SIZE_PERC = "CHANGE_BODY_SIZE_PERC"
    CHILD = "CHILD"
    CHILDNAME = "CHILDNAME"
    CLUTCH_SIZE = "CLUTCH_SIZE"
    COMMON_DOMESTIC = "COMMON_DOMESTIC"
    CONVERTED_SPOUSE = "CONVERTED_SPOUSE"
    COOKABLE_LIVE = "COOKABLE_LIVE"
    CRAZED = "CRAZED"
    CREATURE_CLASS = "CREATURE_CLASS"
    CREPUSCULAR = "CREPUSCULAR"
    CURIOUSBEAST_EATER = "CURIOUSBEAST_EATER"
    CURIOUSBEAST_GUZZLER = "CURIOUSBEAST_GUZZLER"
    CURIOUSBEAST_ITEM = "CURIOUSBEAST_ITEM"
    DEMON = "DEMON"
    DESCRIPTION = "DESCRIPTION"
    DIE_WHEN_VERMIN_BITE = "DIE_WHEN_VERMIN_BITE"
    DIFFICULTY = "DIFFICULTY"
    DIURNAL = "DIURNAL"
    DIVE_HUNTS_VERMIN = "DIVE_HUNTS_VERMIN"
    EBO_ITEM = "EBO_ITEM"
    EBO_SHAPE = "EBO_SHAPE"
    EGG_MATERIAL = "EGG_MATERIAL"
    EGG_SIZE = "EGG_SIZE"
    EQUIPS = "EQUIPS"
    EXTRA_BUTCHER_OBJECT = "EXTRA_BUTCHER_OBJECT"
    EXTRACT = "EXTRACT"
    EXTRAVISION = "EXTRAVISION"
    FEATURE_ATTACK_GROUP = "FEATURE_ATTACK_GROUP"
    FEATURE_BEAST = "FEATURE_BEAST"
    FEMALE = "FEMALE"
    FIREIMMUNE = "FIREIMMUNE"
    FIREIMMUNE_SUPER = "FIREIMMUNE_SUPER"
    FISHITEM = "FISHITEM"
    FIXED_TEMP = "FIXED_TEMP"
    FLEEQUICK = "FLEEQUICK"
    FLIER = "FLIER"
    GAIT = "GAIT"
    GENERAL_MATERIAL_FORCE_MULTIPLIER = "GENERAL_MATERIAL_FORCE_MULTIPLIER"
    GETS_INFECTIONS_FROM_ROT = "GETS_INFECTIONS_FROM_ROT"
    GETS_WOUND_INFECTIONS = "GETS_WOUND_INFECTIONS"
    GNAWER = "GNAWER"
    GOBBLE_VERMIN_CLASS = "GOBBLE_VERMIN_CLASS"
    GOBBLE_VERMIN_CREATURE = "GOBBLE_VERMIN_CREATURE"
    GRASSTRAMPLE = "GRASSTRAMPLE"
    GRAVITATE_BODY_SIZE = "GRAVITATE_BODY_SIZE"
    GRAZER = "GRAZER"
    HABIT = "HABIT"
    HABIT_NUM = "HABIT_NUM"
    HAS_NERVES = "HAS_NERVES"
    HASSHELL = "HASSHELL"
    HOMEOTHERM = "HOMEOTHERM"
    HUNTS_VERMIN = "HUNTS_VERMIN"
    IMMOBILE = "IMMOBILE"
    IMMOBILE_LAND = "IMMOBILE_LAND"
    IMMOLATE = "IMMOLATE"
    INTELLIGENT = "INTELLIGENT"
    ITEMCORPSE = "ITEMCORPSE"
    ITEMCORPSE_QUALITY = "ITEMCORPSE_QUALITY"
    LAIR = "LAIR"
    LAIR_CHARACTERISTIC = "LAIR_CHARACTERISTIC"
    LAIR_HUNTER = "LAIR_HUNTER"
    LAIR_HUNTER_SPEECH = "LAIR_HUNTER_SPEECH"
    LARGE_PREDATOR = "LARGE_PREDATOR"
    LAYS_EGGS = "LAYS_EGGS"
    LAYS_UNUSUAL_EGGS = "LAYS_UNUSUAL_EGGS"
    LIGAMENTS = "LIGAMENTS"
    LIGHT_GEN = "LIGHT_GEN"
    LIKES_FIGHTING = "LIKES_FIGHTING"
    LISP = "LISP"
    LITTERSIZE = "LITTERSIZE"
    LOCKPICKER = "LOCKPICKER"
    LOW_LIGHT_VISION = "LOW_LIGHT_VISION"
    MAGICAL = "MAGICAL"
    MAGMA_VISION = "MAGMA_VISION"
    MALE = "MALE"
    MANNERISM_ARMS = "MANNERISM_ARMS"
    MANNERISM_BREATH = "MANNERISM_BREATH"
    MANNERISM_CHEEK = "MANNERISM_CHEEK"
    MANNERISM_EAR = "MANNERISM_EAR"
    MANNERISM_EYELIDS = "MANNERISM_EYELIDS"
    MANNERISM_EYES = "MANNERISM_EYES"
    MANNERISM_FEET = "MANNERISM_FEET"
    MANNERISM_FINGERS = "MANNERISM_FINGERS"
    MANNERISM_HANDS = "MANNERISM_HANDS"
    MANNERISM_HEAD = "MANNERISM_HEAD"
    MANNERISM_KNUCKLES = "MANNERISM_KNUCKLES"
    MANNERISM_LAUGH = "MANNERISM_LAUGH"
    MANNERISM_LEG = "MANNERISM_LEG"
    MANNERISM_LIPS = "MANNERISM_LIPS"
    MANNERISM_MOUTH = "MANNERISM_MOUTH"
    MANNERISM_NAILS = "MANNERISM_NAILS"
    MANNERISM_NOSE = "MANNERISM_NOSE"
    MANNERISM_POSTURE = "MANNERISM_POSTURE"
    MANNERISM_SIT = "MANNERISM_SIT"
    MANNERISM_SMILE = "MANNERISM_SMILE"
    MANNERISM_STRETCH = "MANNERISM_STRETCH"
    MANNERISM_TONGUE = "MANNERISM_TONGUE"
    MANNERISM_WALK = "MANNERISM_WALK"
    MATUTINAL = "MATUTINAL"
    MAXAGE = "MAXAGE"
    MEANDERER = "MEANDERER"
    MEGABEAST = "MEGABEAST"
    MENT_ATT_CAP_PERC = "MENT_ATT_CAP_PERC"
    MENT_ATT_RANGE = "MENT_ATT_RANGE"
    MENT_ATT_RATE = "MENT_ATT_RATE"
    MILKABLE = "MILKABLE"
    MISCHIEVOUS = "MISCHIEVOUS"
    MODVALUE = "MODVALUE"
    MOUNT = "MOUNT"
    MOUNT_EXOTIC = "MOUNT_EXOTIC"
    MULTIPART_FULL_VISION = "MULTIPART_FULL_VISION"
    MULTIPLE_LITTER_RARE = "MULTIPLE_LITTER_RARE"
    NATURAL = "NATURAL"
    NATURAL_ANIMAL = "NATURAL_ANIMAL"
    NATURAL_SKILL = "NATURAL_SKILL"
    NIGHT_CREATURE_BOGEYMAN = "NIGHT_CREATURE_BOGEYMAN"
    NIGHT_CREATURE_EXPERIMENTER = "NIGHT_CREATURE_EXPERIMENTER"
    NIGHT_CREATURE_HUNTER = "NIGHT_CREATURE_HUNTER"
    NIGHT_CREATURE_NIGHTMARE = "NIGHT_CREATURE_NIGHTMARE"
    NO_CONNECTIONS_FOR_MOVEMENT = "NO_CONNECTIONS_FOR_MOVEMENT"
    NO_DIZZINESS = "NO_DIZZINESS"
    NO_DRINK = "NO_DRINK"
    NO_EAT = "NO_EAT"
    NO_FALL = "NO_FALL"
    NO_FEVERS = "NO_FEVERS"
    NO_GENDER = "NO_GENDER"
    NO_PHYS_ATT_GAIN = "NO_PHYS_ATT_GAIN"
    NO_PHYS_ATT_RUST = "NO_PHYS_ATT_RUST"
    NO_SLEEP = "NO_SLEEP"
    NO_SPRING = "NO_SPRING"
    NO_SUMMER = "NO_SUMMER"
    NO_THOUGHT_CENTER_FOR_MOVEMENT = "NO_THOUGHT_CENTER_FOR_MOVEMENT"
    NO_UNIT_TYPE_COLOR = "NO_UNIT_TYPE_COLOR"
    NO_VEGETATION_PERTURB = "NO_VEGETATION_PERTURB"
    NO_WINTER = "NO_WINTER"
    NOBONES = "NOBONES"
    NOBREATHE = "NOBREATHE"
    NOCTURNAL = "NOCTURNAL"
    NOEMOTION = "NOEMOTION"
    NOEXERT = "NOEXERT"
    NOFEAR = "NOFEAR"
    NOMEAT = "NOMEAT"
    NONAUSEA = "NONAUSEA"
    NOPAIN = "NOPAIN"
    NOSKIN = "NOSKIN"
    NOSKULL = "NOSKULL"
    NOSMELLYROT = "NOSMELLYROT"
    NOSTUCKINS = "NOSTUCKINS"
    NOSTUN = "NOSTUN"
    NOT_BUTCHERABLE = "NOT_BUTCHERABLE"
    NOT_LIVING = "NOT_LIVING"
    NOTHOUGHT = "NOTHOUGHT"
    ODOR_LEVEL = "ODOR_LEVEL"
    ODOR_STRING = "ODOR_STRING"
    OPPOSED_TO_LIFE = "OPPOSED_TO_LIFE"
    ORIENTATION = "ORIENTATION"
    OUTSIDER_CONTROLLABLE = "OUTSIDER_CONTROLLABLE"
    PACK_ANIMAL = "PACK_ANIMAL"
    PARALYZEIMMUNE = "PARALYZEIMMUNE"
    PATTERNFLIER = "PATTERNFLIER"
    PEARL = "PEARL"
    PENETRATEPOWER = "PENETRATEPOWER"
    PERSONALITY = "PERSONALITY"
    PET = "PET"
    PET_EXOTIC = "PET_EXOTIC"
    PETVALUE = "PETVALUE"
    PETVALUE_DIVISOR = "PETVALUE_DIVISOR"
    PHYS_ATT_CAP_PERC = "PHYS_ATT_CAP_PERC"
    PHYS_ATT_RANGE = "PHYS_ATT_RANGE"
    PHYS_ATT_RATE = "PHYS_ATT_RATE"
    PLUS_BP_GROUP = "PLUS_BP_GROUP"
    POP_RATIO = "POP_RATIO"
    POWER = "POWER"
    PRONE_TO_RAGE = "PRONE_TO_RAGE"
    PUS = "PUS"
    RELSIZE = "RELSIZE"
    REMAINS = "REMAINS"
    REMAINS_COLOR = "REMAINS_COLOR"
    REMAINS_ON_VERMIN_BITE_DEATH = "REMAINS_ON_VERMIN_BITE_DEATH"
    REMAINS_UNDETERMINED = "REMAINS_UNDETERMINED"
    RETRACT_INTO_BP = "RETRACT_INTO_BP"
    RETURNS_VERMIN_KILLS_TO_OWNER = "RETURNS_VERMIN_KILLS_TO_OWNER"
    ROOT_AROUND = "ROOT_AROUND"
    SECRETION = "SECRETION"
    SEMIMEGABEAST = "SEMIMEGABEAST"
    SENSE_CREATURE_CLASS = "SENSE_CREATURE_CLASS"
    SET_BP_GROUP = "SET_BP_GROUP"
    SET_TL_GROUP = "SET_TL_GROUP"
    SKILL_LEARN_RATE = "SKILL_LEARN_RATE"
    SKILL_LEARN_RATES = "SKILL_LEARN_RATES"
    SKILL_RATE = "SKILL_RATE"
    SKILL_RATES = "SKILL_RATES"
    SKILL_RUST_RATE = "SKILL_RUST_RATE"
    SKILL_RUST_RATES = "SKILL_RUST_RATES"
    SLAIN_SPEECH = "SLAIN_SPEECH"
    SLOW_LEARNER = "SLOW_LEARNER"
    SMALL_REMAINS = "SMALL_REMAINS"
    SOUND = "SOUND"
    SPECIFIC_FOOD = "SPECIFIC_FOOD"
    SPOUSE_CONVERSION_TARGET = "SPOUSE_CONVERSION_TARGET"
    SPOUSE_CONVERTER = "SPOUSE_CONVERTER"
    SPREAD_EVIL_SPHERES_IF_RULER = "SPREAD_EVIL_SPHERES_IF_RULER"
    STANCE_CLIMBER = "STANCE_CLIMBER"
    STANDARD_GRAZER = "STANDARD_GRAZER"
    STRANGE_MOODS = "STRANGE_MOODS"
    SUPERNATURAL = "SUPERNATURAL"
    SWIMS_INNATE = "SWIMS_INNATE"
    SWIMS_LEARNED = "SWIMS_LEARNED"
    SYNDROME_DILUTION_FACTOR = "SYNDROME_DILUTION_FACTOR"
    TENDONS = "TENDONS"
    THICKWEB = "THICKWEB"
    TISSUE_LAYER = "TISSUE_LAYER"
    TISSUE_LAYER_OVER = "TISSUE_LAYER_OVER"
    TISSUE_LAYER_UNDER = "TISSUE_LAYER_UNDER"
    TISSUE_MAT_RESERVE = "TISSUE_MAT_RESERVE"
    TISSUE_TEMPLATE = "TISSUE_TEMPLATE"
    TITAN = "TITAN"
    TL_COLOR_MODIFIER = "TL_COLOR_MODIFIER"
    TRADE_CAPACITY = "TRADE_CAPACITY"
    TRAINABLE = "TRAINABLE"
    TRAINABLE_HUNTING = "TRAINABLE_HUNTING"
    TRAINABLE_WAR = "TRAINABLE_WAR"
    TRANCES = "TRANCES"
    TRAPAVOID = "TRAPAVOID"
    UNDERSWIM = "UNDERSWIM"
    UNIQUE_DEMON = "UNIQUE_DEMON"
    USE_MATERIAL_TEMPLATE_CASTE = "USE_MATERIAL_TEMPLATE_CASTE"
    VEGETATION = "VEGETATION"
    VERMIN_BITE = "VERMIN_BITE"
    VERMIN_HATEABLE = "VERMIN_HATEABLE"
    VERMIN_MICRO = "VERMIN_MICRO"
    VERMIN_NOFISH = "VERMIN_NOFISH"
    VERMIN_NOROAM = "VERMIN_NOROAM"
    VERMIN_NOTRAP = "VERMIN_NOTRAP"
    VERMINHUNTER = "VERMINHUNTER"
    VESPERTINE = "VESPERTINE"
    VIEWRANGE = "VIEWRANGE"
    VISION_ARC = "VISION_ARC"
    WAGON_PULLER = "WAGON_PULLER"
    WEBBER = "WEBBER"
    WEBIMMUNE = "WEBIMMUNE"
    UNKNOWN = "UNKNOWN"


CASTE_TOKENS = build_token_map(CasteTag)

CASTE_TOKEN_ALIASES = {
    "INTELLIGENT_LEARNS": "CAN_LEARN",
    "INTELLIGENT_SPEAKS": "CAN_SPEAK",
    "CAN_SWIM": "SWIMS_INNATE",
    "FLY_RACE_GAIT": "FLIER",
    "MISCHIEVIOUS": "MISCHIEVOUS",
}
"""Alternative spellings, mostly seen in legends exports."""
