# AUTO-GENERATED FILE. DO NOT EDIT MANUALLY.
# Generated from genres.json

"""Flat index of all genre and subgenre entries, in GenreId ordinal order."""

from domain.generated.genre_id import GenreId
from domain.schemas import EntryKind, IndexEntry

GENRE_ENTRIES: tuple[IndexEntry, ...] = (
    IndexEntry(
        id="rock",
        name="Rock",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Rock,
    ),
    IndexEntry(
        id="hard_rock",
        name="Hard Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.HardRock,
    ),
    IndexEntry(
        id="classic_rock",
        name="Classic Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.ClassicRock,
    ),
    IndexEntry(
        id="punk_rock",
        name="Punk Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.PunkRock,
    ),
    IndexEntry(
        id="alternative_rock",
        name="Alternative Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.AlternativeRock,
    ),
    IndexEntry(
        id="indie_rock",
        name="Indie Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.IndieRock,
    ),
    IndexEntry(
        id="progressive_rock",
        name="Progressive Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.ProgressiveRock,
    ),
    IndexEntry(
        id="garage_rock",
        name="Garage Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.GarageRock,
    ),
    IndexEntry(
        id="post_rock",
        name="Post-Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.PostRock,
    ),
    IndexEntry(
        id="math_rock",
        name="Math Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.MathRock,
    ),
    IndexEntry(
        id="grunge",
        name="Grunge",
        kind=EntryKind.SUBGENRE,
        parent_id="rock",
        value=GenreId.Grunge,
    ),
    IndexEntry(
        id="pop",
        name="Pop",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Pop,
    ),
    IndexEntry(
        id="dance_pop",
        name="Dance Pop",
        kind=EntryKind.SUBGENRE,
        parent_id="pop",
        value=GenreId.DancePop,
    ),
    IndexEntry(
        id="electropop",
        name="Electropop",
        kind=EntryKind.SUBGENRE,
        parent_id="pop",
        value=GenreId.Electropop,
    ),
    IndexEntry(
        id="synthpop",
        name="Synthpop",
        kind=EntryKind.SUBGENRE,
        parent_id="pop",
        value=GenreId.Synthpop,
    ),
    IndexEntry(
        id="teen_pop",
        name="Teen Pop",
        kind=EntryKind.SUBGENRE,
        parent_id="pop",
        value=GenreId.TeenPop,
    ),
    IndexEntry(
        id="k_pop",
        name="K-Pop",
        kind=EntryKind.SUBGENRE,
        parent_id="pop",
        value=GenreId.KPop,
    ),
    IndexEntry(
        id="baroque_pop",
        name="Baroque Pop",
        kind=EntryKind.SUBGENRE,
        parent_id="pop",
        value=GenreId.BaroquePop,
    ),
    IndexEntry(
        id="art_pop",
        name="Art Pop",
        kind=EntryKind.SUBGENRE,
        parent_id="pop",
        value=GenreId.ArtPop,
    ),
    IndexEntry(
        id="hip_hop",
        name="Hip Hop / Rap",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.HipHop,
    ),
    IndexEntry(
        id="trap",
        name="Trap",
        kind=EntryKind.SUBGENRE,
        parent_id="hip_hop",
        value=GenreId.Trap,
    ),
    IndexEntry(
        id="boom_bap",
        name="Boom Bap",
        kind=EntryKind.SUBGENRE,
        parent_id="hip_hop",
        value=GenreId.BoomBap,
    ),
    IndexEntry(
        id="gangsta_rap",
        name="Gangsta Rap",
        kind=EntryKind.SUBGENRE,
        parent_id="hip_hop",
        value=GenreId.GangstaRap,
    ),
    IndexEntry(
        id="conscious_rap",
        name="Conscious Rap",
        kind=EntryKind.SUBGENRE,
        parent_id="hip_hop",
        value=GenreId.ConsciousRap,
    ),
    IndexEntry(
        id="lofi_hip_hop",
        name="Lo-fi Hip Hop",
        kind=EntryKind.SUBGENRE,
        parent_id="hip_hop",
        value=GenreId.LofiHipHop,
    ),
    IndexEntry(
        id="drill",
        name="Drill",
        kind=EntryKind.SUBGENRE,
        parent_id="hip_hop",
        value=GenreId.Drill,
    ),
    IndexEntry(
        id="cloud_rap",
        name="Cloud Rap",
        kind=EntryKind.SUBGENRE,
        parent_id="hip_hop",
        value=GenreId.CloudRap,
    ),
    IndexEntry(
        id="experimental_hip_hop",
        name="Experimental Hip Hop",
        kind=EntryKind.SUBGENRE,
        parent_id="hip_hop",
        value=GenreId.ExperimentalHipHop,
    ),
    IndexEntry(
        id="electronic",
        name="Electronic",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Electronic,
    ),
    IndexEntry(
        id="house",
        name="House",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.House,
    ),
    IndexEntry(
        id="techno",
        name="Techno",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Techno,
    ),
    IndexEntry(
        id="trance",
        name="Trance",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Trance,
    ),
    IndexEntry(
        id="dubstep",
        name="Dubstep",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Dubstep,
    ),
    IndexEntry(
        id="drum_and_bass",
        name="Drum and Bass",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.DrumAndBass,
    ),
    IndexEntry(
        id="electronic_ambient",
        name="Ambient (Electronic)",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.ElectronicAmbient,
    ),
    IndexEntry(
        id="idm",
        name="IDM",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Idm,
    ),
    IndexEntry(
        id="electro",
        name="Electro",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Electro,
    ),
    IndexEntry(
        id="downtempo",
        name="Downtempo",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Downtempo,
    ),
    IndexEntry(
        id="breakbeat",
        name="Breakbeat",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Breakbeat,
    ),
    IndexEntry(
        id="hardstyle",
        name="Hardstyle",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Hardstyle,
    ),
    IndexEntry(
        id="triphop",
        name="Trip Hop",
        kind=EntryKind.SUBGENRE,
        parent_id="electronic",
        value=GenreId.Triphop,
    ),
    IndexEntry(
        id="r_and_b",
        name="R&B / Soul",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.RAndB,
    ),
    IndexEntry(
        id="contemporary_r_and_b",
        name="Contemporary R&B",
        kind=EntryKind.SUBGENRE,
        parent_id="r_and_b",
        value=GenreId.ContemporaryRAndB,
    ),
    IndexEntry(
        id="neo_soul",
        name="Neo Soul",
        kind=EntryKind.SUBGENRE,
        parent_id="r_and_b",
        value=GenreId.NeoSoul,
    ),
    IndexEntry(
        id="motown",
        name="Motown",
        kind=EntryKind.SUBGENRE,
        parent_id="r_and_b",
        value=GenreId.Motown,
    ),
    IndexEntry(
        id="funk",
        name="Funk",
        kind=EntryKind.SUBGENRE,
        parent_id="r_and_b",
        value=GenreId.Funk,
    ),
    IndexEntry(
        id="quiet_storm",
        name="Quiet Storm",
        kind=EntryKind.SUBGENRE,
        parent_id="r_and_b",
        value=GenreId.QuietStorm,
    ),
    IndexEntry(
        id="blue_eyed_soul",
        name="Blue-Eyed Soul",
        kind=EntryKind.SUBGENRE,
        parent_id="r_and_b",
        value=GenreId.BlueEyedSoul,
    ),
    IndexEntry(
        id="jazz",
        name="Jazz",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Jazz,
    ),
    IndexEntry(
        id="bebop",
        name="Bebop",
        kind=EntryKind.SUBGENRE,
        parent_id="jazz",
        value=GenreId.Bebop,
    ),
    IndexEntry(
        id="swing",
        name="Swing",
        kind=EntryKind.SUBGENRE,
        parent_id="jazz",
        value=GenreId.Swing,
    ),
    IndexEntry(
        id="cool_jazz",
        name="Cool Jazz",
        kind=EntryKind.SUBGENRE,
        parent_id="jazz",
        value=GenreId.CoolJazz,
    ),
    IndexEntry(
        id="fusion",
        name="Fusion",
        kind=EntryKind.SUBGENRE,
        parent_id="jazz",
        value=GenreId.Fusion,
    ),
    IndexEntry(
        id="acid_jazz",
        name="Acid Jazz",
        kind=EntryKind.SUBGENRE,
        parent_id="jazz",
        value=GenreId.AcidJazz,
    ),
    IndexEntry(
        id="latin_jazz",
        name="Latin Jazz",
        kind=EntryKind.SUBGENRE,
        parent_id="jazz",
        value=GenreId.LatinJazz,
    ),
    IndexEntry(
        id="vocal_jazz",
        name="Vocal Jazz",
        kind=EntryKind.SUBGENRE,
        parent_id="jazz",
        value=GenreId.VocalJazz,
    ),
    IndexEntry(
        id="classical",
        name="Classical",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Classical,
    ),
    IndexEntry(
        id="baroque",
        name="Baroque",
        kind=EntryKind.SUBGENRE,
        parent_id="classical",
        value=GenreId.Baroque,
    ),
    IndexEntry(
        id="classical_period",
        name="Classical Period",
        kind=EntryKind.SUBGENRE,
        parent_id="classical",
        value=GenreId.ClassicalPeriod,
    ),
    IndexEntry(
        id="romantic",
        name="Romantic",
        kind=EntryKind.SUBGENRE,
        parent_id="classical",
        value=GenreId.Romantic,
    ),
    IndexEntry(
        id="contemporary_classical",
        name="Contemporary Classical",
        kind=EntryKind.SUBGENRE,
        parent_id="classical",
        value=GenreId.ContemporaryClassical,
    ),
    IndexEntry(
        id="opera",
        name="Opera",
        kind=EntryKind.SUBGENRE,
        parent_id="classical",
        value=GenreId.Opera,
    ),
    IndexEntry(
        id="chamber_music",
        name="Chamber Music",
        kind=EntryKind.SUBGENRE,
        parent_id="classical",
        value=GenreId.ChamberMusic,
    ),
    IndexEntry(
        id="electroacoustic",
        name="Electroacoustic",
        kind=EntryKind.SUBGENRE,
        parent_id="classical",
        value=GenreId.Electroacoustic,
    ),
    IndexEntry(
        id="country",
        name="Country",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Country,
    ),
    IndexEntry(
        id="bluegrass",
        name="Bluegrass",
        kind=EntryKind.SUBGENRE,
        parent_id="country",
        value=GenreId.Bluegrass,
    ),
    IndexEntry(
        id="outlaw_country",
        name="Outlaw Country",
        kind=EntryKind.SUBGENRE,
        parent_id="country",
        value=GenreId.OutlawCountry,
    ),
    IndexEntry(
        id="alt_country",
        name="Alt-Country",
        kind=EntryKind.SUBGENRE,
        parent_id="country",
        value=GenreId.AltCountry,
    ),
    IndexEntry(
        id="contemporary_country",
        name="Contemporary Country",
        kind=EntryKind.SUBGENRE,
        parent_id="country",
        value=GenreId.ContemporaryCountry,
    ),
    IndexEntry(
        id="country_pop",
        name="Country Pop",
        kind=EntryKind.SUBGENRE,
        parent_id="country",
        value=GenreId.CountryPop,
    ),
    IndexEntry(
        id="honky_tonk",
        name="Honky Tonk",
        kind=EntryKind.SUBGENRE,
        parent_id="country",
        value=GenreId.HonkyTonk,
    ),
    IndexEntry(
        id="latin",
        name="Latin",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Latin,
    ),
    IndexEntry(
        id="reggaeton",
        name="Reggaeton",
        kind=EntryKind.SUBGENRE,
        parent_id="latin",
        value=GenreId.Reggaeton,
    ),
    IndexEntry(
        id="salsa",
        name="Salsa",
        kind=EntryKind.SUBGENRE,
        parent_id="latin",
        value=GenreId.Salsa,
    ),
    IndexEntry(
        id="bachata",
        name="Bachata",
        kind=EntryKind.SUBGENRE,
        parent_id="latin",
        value=GenreId.Bachata,
    ),
    IndexEntry(
        id="latin_rock",
        name="Latin Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="latin",
        value=GenreId.LatinRock,
    ),
    IndexEntry(
        id="cumbia",
        name="Cumbia",
        kind=EntryKind.SUBGENRE,
        parent_id="latin",
        value=GenreId.Cumbia,
    ),
    IndexEntry(
        id="merengue",
        name="Merengue",
        kind=EntryKind.SUBGENRE,
        parent_id="latin",
        value=GenreId.Merengue,
    ),
    IndexEntry(
        id="tango",
        name="Tango",
        kind=EntryKind.SUBGENRE,
        parent_id="latin",
        value=GenreId.Tango,
    ),
    IndexEntry(
        id="reggae",
        name="Reggae",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Reggae,
    ),
    IndexEntry(
        id="roots_reggae",
        name="Roots Reggae",
        kind=EntryKind.SUBGENRE,
        parent_id="reggae",
        value=GenreId.RootsReggae,
    ),
    IndexEntry(
        id="dancehall",
        name="Dancehall",
        kind=EntryKind.SUBGENRE,
        parent_id="reggae",
        value=GenreId.Dancehall,
    ),
    IndexEntry(
        id="dub",
        name="Dub",
        kind=EntryKind.SUBGENRE,
        parent_id="reggae",
        value=GenreId.Dub,
    ),
    IndexEntry(
        id="ska",
        name="Ska",
        kind=EntryKind.SUBGENRE,
        parent_id="reggae",
        value=GenreId.Ska,
    ),
    IndexEntry(
        id="rocksteady",
        name="Rocksteady",
        kind=EntryKind.SUBGENRE,
        parent_id="reggae",
        value=GenreId.Rocksteady,
    ),
    IndexEntry(
        id="metal",
        name="Metal",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Metal,
    ),
    IndexEntry(
        id="heavy_metal",
        name="Heavy Metal",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.HeavyMetal,
    ),
    IndexEntry(
        id="thrash_metal",
        name="Thrash Metal",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.ThrashMetal,
    ),
    IndexEntry(
        id="death_metal",
        name="Death Metal",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.DeathMetal,
    ),
    IndexEntry(
        id="black_metal",
        name="Black Metal",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.BlackMetal,
    ),
    IndexEntry(
        id="doom_metal",
        name="Doom Metal",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.DoomMetal,
    ),
    IndexEntry(
        id="power_metal",
        name="Power Metal",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.PowerMetal,
    ),
    IndexEntry(
        id="metalcore",
        name="Metalcore",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.Metalcore,
    ),
    IndexEntry(
        id="symphonic_metal",
        name="Symphonic Metal",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.SymphonicMetal,
    ),
    IndexEntry(
        id="progressive_metal",
        name="Progressive Metal",
        kind=EntryKind.SUBGENRE,
        parent_id="metal",
        value=GenreId.ProgressiveMetal,
    ),
    IndexEntry(
        id="folk",
        name="Folk",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Folk,
    ),
    IndexEntry(
        id="folk_rock",
        name="Folk Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="folk",
        value=GenreId.FolkRock,
    ),
    IndexEntry(
        id="traditional_folk",
        name="Traditional Folk",
        kind=EntryKind.SUBGENRE,
        parent_id="folk",
        value=GenreId.TraditionalFolk,
    ),
    IndexEntry(
        id="indie_folk",
        name="Indie Folk",
        kind=EntryKind.SUBGENRE,
        parent_id="folk",
        value=GenreId.IndieFolk,
    ),
    IndexEntry(
        id="progressive_folk",
        name="Progressive Folk",
        kind=EntryKind.SUBGENRE,
        parent_id="folk",
        value=GenreId.ProgressiveFolk,
    ),
    IndexEntry(
        id="world",
        name="World",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.World,
    ),
    IndexEntry(
        id="afrobeat",
        name="Afrobeat",
        kind=EntryKind.SUBGENRE,
        parent_id="world",
        value=GenreId.Afrobeat,
    ),
    IndexEntry(
        id="highlife",
        name="Highlife",
        kind=EntryKind.SUBGENRE,
        parent_id="world",
        value=GenreId.Highlife,
    ),
    IndexEntry(
        id="brazilian",
        name="Brazilian",
        kind=EntryKind.SUBGENRE,
        parent_id="world",
        value=GenreId.Brazilian,
    ),
    IndexEntry(
        id="flamenco",
        name="Flamenco",
        kind=EntryKind.SUBGENRE,
        parent_id="world",
        value=GenreId.Flamenco,
    ),
    IndexEntry(
        id="celtic",
        name="Celtic",
        kind=EntryKind.SUBGENRE,
        parent_id="world",
        value=GenreId.Celtic,
    ),
    IndexEntry(
        id="bharatnatyam",
        name="Bharatanatyam",
        kind=EntryKind.SUBGENRE,
        parent_id="world",
        value=GenreId.Bharatnatyam,
    ),
    IndexEntry(
        id="gamelan",
        name="Gamelan",
        kind=EntryKind.SUBGENRE,
        parent_id="world",
        value=GenreId.Gamelan,
    ),
    IndexEntry(
        id="fado",
        name="Fado",
        kind=EntryKind.SUBGENRE,
        parent_id="world",
        value=GenreId.Fado,
    ),
    IndexEntry(
        id="soundtrack",
        name="Soundtrack / Score",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Soundtrack,
    ),
    IndexEntry(
        id="film_score",
        name="Film Score",
        kind=EntryKind.SUBGENRE,
        parent_id="soundtrack",
        value=GenreId.FilmScore,
    ),
    IndexEntry(
        id="video_game_music",
        name="Video Game Music",
        kind=EntryKind.SUBGENRE,
        parent_id="soundtrack",
        value=GenreId.VideoGameMusic,
    ),
    IndexEntry(
        id="musical_soundtrack",
        name="Musical Soundtrack",
        kind=EntryKind.SUBGENRE,
        parent_id="soundtrack",
        value=GenreId.MusicalSoundtrack,
    ),
    IndexEntry(
        id="television_score",
        name="Television Score",
        kind=EntryKind.SUBGENRE,
        parent_id="soundtrack",
        value=GenreId.TelevisionScore,
    ),
    IndexEntry(
        id="experimental",
        name="Experimental / Avant-Garde",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Experimental,
    ),
    IndexEntry(
        id="noise",
        name="Noise",
        kind=EntryKind.SUBGENRE,
        parent_id="experimental",
        value=GenreId.Noise,
    ),
    IndexEntry(
        id="musique_concrete",
        name="Musique Concrète",
        kind=EntryKind.SUBGENRE,
        parent_id="experimental",
        value=GenreId.MusiqueConcrete,
    ),
    IndexEntry(
        id="glitch",
        name="Glitch",
        kind=EntryKind.SUBGENRE,
        parent_id="experimental",
        value=GenreId.Glitch,
    ),
    IndexEntry(
        id="minimalism",
        name="Minimalism",
        kind=EntryKind.SUBGENRE,
        parent_id="experimental",
        value=GenreId.Minimalism,
    ),
    IndexEntry(
        id="electroacoustic_experimental",
        name="Electroacoustic (Experimental)",
        kind=EntryKind.SUBGENRE,
        parent_id="experimental",
        value=GenreId.ElectroacousticExperimental,
    ),
    IndexEntry(
        id="punk",
        name="Punk",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Punk,
    ),
    IndexEntry(
        id="hardcore_punk",
        name="Hardcore Punk",
        kind=EntryKind.SUBGENRE,
        parent_id="punk",
        value=GenreId.HardcorePunk,
    ),
    IndexEntry(
        id="post_punk",
        name="Post-Punk",
        kind=EntryKind.SUBGENRE,
        parent_id="punk",
        value=GenreId.PostPunk,
    ),
    IndexEntry(
        id="ska_punk",
        name="Ska Punk",
        kind=EntryKind.SUBGENRE,
        parent_id="punk",
        value=GenreId.SkaPunk,
    ),
    IndexEntry(
        id="crust_punk",
        name="Crust Punk",
        kind=EntryKind.SUBGENRE,
        parent_id="punk",
        value=GenreId.CrustPunk,
    ),
    IndexEntry(
        id="gospel_christian",
        name="Gospel / Christian",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.GospelChristian,
    ),
    IndexEntry(
        id="gospel",
        name="Gospel",
        kind=EntryKind.SUBGENRE,
        parent_id="gospel_christian",
        value=GenreId.Gospel,
    ),
    IndexEntry(
        id="contemporary_christian",
        name="Contemporary Christian",
        kind=EntryKind.SUBGENRE,
        parent_id="gospel_christian",
        value=GenreId.ContemporaryChristian,
    ),
    IndexEntry(
        id="christian_rock",
        name="Christian Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="gospel_christian",
        value=GenreId.ChristianRock,
    ),
    IndexEntry(
        id="blues",
        name="Blues",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Blues,
    ),
    IndexEntry(
        id="delta_blues",
        name="Delta Blues",
        kind=EntryKind.SUBGENRE,
        parent_id="blues",
        value=GenreId.DeltaBlues,
    ),
    IndexEntry(
        id="electric_blues",
        name="Electric Blues",
        kind=EntryKind.SUBGENRE,
        parent_id="blues",
        value=GenreId.ElectricBlues,
    ),
    IndexEntry(
        id="urban_blues",
        name="Urban Blues",
        kind=EntryKind.SUBGENRE,
        parent_id="blues",
        value=GenreId.UrbanBlues,
    ),
    IndexEntry(
        id="blues_rock",
        name="Blues Rock",
        kind=EntryKind.SUBGENRE,
        parent_id="blues",
        value=GenreId.BluesRock,
    ),
    IndexEntry(
        id="ambient",
        name="Ambient",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.Ambient,
    ),
    IndexEntry(
        id="dark_ambient",
        name="Dark Ambient",
        kind=EntryKind.SUBGENRE,
        parent_id="ambient",
        value=GenreId.DarkAmbient,
    ),
    IndexEntry(
        id="space_ambient",
        name="Space Ambient",
        kind=EntryKind.SUBGENRE,
        parent_id="ambient",
        value=GenreId.SpaceAmbient,
    ),
    IndexEntry(
        id="ambient_new_age",
        name="Ambient New Age",
        kind=EntryKind.SUBGENRE,
        parent_id="ambient",
        value=GenreId.AmbientNewAge,
    ),
    IndexEntry(
        id="new_age",
        name="New Age",
        kind=EntryKind.GENRE,
        parent_id=None,
        value=GenreId.NewAge,
    ),
    IndexEntry(
        id="meditation",
        name="Meditation",
        kind=EntryKind.SUBGENRE,
        parent_id="new_age",
        value=GenreId.Meditation,
    ),
    IndexEntry(
        id="relaxation",
        name="Relaxation",
        kind=EntryKind.SUBGENRE,
        parent_id="new_age",
        value=GenreId.Relaxation,
    ),
    IndexEntry(
        id="healing",
        name="Healing",
        kind=EntryKind.SUBGENRE,
        parent_id="new_age",
        value=GenreId.Healing,
    ),
)
