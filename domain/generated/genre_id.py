# AUTO-GENERATED FILE. DO NOT EDIT MANUALLY.
# Generated from genres.json

"""
Flat enum containing all main genres and subgenres.

Subgenres are grouped under genre-level comments. Member values are the
ordinals persisted by the binary codec: never reorder or renumber members.
"""

from enum import IntEnum

MAX_ENCODED_LEN = 1


class GenreId(IntEnum):
    # ===== Genre: Rock =====
    Rock = 0
    HardRock = 1
    ClassicRock = 2
    PunkRock = 3
    AlternativeRock = 4
    IndieRock = 5
    ProgressiveRock = 6
    GarageRock = 7
    PostRock = 8
    MathRock = 9
    Grunge = 10

    # ===== Genre: Pop =====
    Pop = 11
    DancePop = 12
    Electropop = 13
    Synthpop = 14
    TeenPop = 15
    KPop = 16
    BaroquePop = 17
    ArtPop = 18

    # ===== Genre: Hip Hop / Rap =====
    HipHop = 19
    Trap = 20
    BoomBap = 21
    GangstaRap = 22
    ConsciousRap = 23
    LofiHipHop = 24
    Drill = 25
    CloudRap = 26
    ExperimentalHipHop = 27

    # ===== Genre: Electronic =====
    Electronic = 28
    House = 29
    Techno = 30
    Trance = 31
    Dubstep = 32
    DrumAndBass = 33
    ElectronicAmbient = 34
    Idm = 35
    Electro = 36
    Downtempo = 37
    Breakbeat = 38
    Hardstyle = 39
    Triphop = 40

    # ===== Genre: R&B / Soul =====
    RAndB = 41
    ContemporaryRAndB = 42
    NeoSoul = 43
    Motown = 44
    Funk = 45
    QuietStorm = 46
    BlueEyedSoul = 47

    # ===== Genre: Jazz =====
    Jazz = 48
    Bebop = 49
    Swing = 50
    CoolJazz = 51
    Fusion = 52
    AcidJazz = 53
    LatinJazz = 54
    VocalJazz = 55

    # ===== Genre: Classical =====
    Classical = 56
    Baroque = 57
    ClassicalPeriod = 58
    Romantic = 59
    ContemporaryClassical = 60
    Opera = 61
    ChamberMusic = 62
    Electroacoustic = 63

    # ===== Genre: Country =====
    Country = 64
    Bluegrass = 65
    OutlawCountry = 66
    AltCountry = 67
    ContemporaryCountry = 68
    CountryPop = 69
    HonkyTonk = 70

    # ===== Genre: Latin =====
    Latin = 71
    Reggaeton = 72
    Salsa = 73
    Bachata = 74
    LatinRock = 75
    Cumbia = 76
    Merengue = 77
    Tango = 78

    # ===== Genre: Reggae =====
    Reggae = 79
    RootsReggae = 80
    Dancehall = 81
    Dub = 82
    Ska = 83
    Rocksteady = 84

    # ===== Genre: Metal =====
    Metal = 85
    HeavyMetal = 86
    ThrashMetal = 87
    DeathMetal = 88
    BlackMetal = 89
    DoomMetal = 90
    PowerMetal = 91
    Metalcore = 92
    SymphonicMetal = 93
    ProgressiveMetal = 94

    # ===== Genre: Folk =====
    Folk = 95
    FolkRock = 96
    TraditionalFolk = 97
    IndieFolk = 98
    ProgressiveFolk = 99

    # ===== Genre: World =====
    World = 100
    Afrobeat = 101
    Highlife = 102
    Brazilian = 103
    Flamenco = 104
    Celtic = 105
    Bharatnatyam = 106
    Gamelan = 107
    Fado = 108

    # ===== Genre: Soundtrack / Score =====
    Soundtrack = 109
    FilmScore = 110
    VideoGameMusic = 111
    MusicalSoundtrack = 112
    TelevisionScore = 113

    # ===== Genre: Experimental / Avant-Garde =====
    Experimental = 114
    Noise = 115
    MusiqueConcrete = 116
    Glitch = 117
    Minimalism = 118
    ElectroacousticExperimental = 119

    # ===== Genre: Punk =====
    Punk = 120
    HardcorePunk = 121
    PostPunk = 122
    SkaPunk = 123
    CrustPunk = 124

    # ===== Genre: Gospel / Christian =====
    GospelChristian = 125
    Gospel = 126
    ContemporaryChristian = 127
    ChristianRock = 128

    # ===== Genre: Blues =====
    Blues = 129
    DeltaBlues = 130
    ElectricBlues = 131
    UrbanBlues = 132
    BluesRock = 133

    # ===== Genre: Ambient =====
    Ambient = 134
    DarkAmbient = 135
    SpaceAmbient = 136
    AmbientNewAge = 137

    # ===== Genre: New Age =====
    NewAge = 138
    Meditation = 139
    Relaxation = 140
    Healing = 141
