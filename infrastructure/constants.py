from pathlib import Path

# Repo-root conventional directories/files (overrideable via generator.yaml)
CONFIG_DIR = Path("configs")
GENERATOR_CONFIG_FILE = CONFIG_DIR / "generator.yaml"
TAXONOMY_FILE = Path("genres.json")
HEADER_FILE = Path("HEADER")

GENERATED_DIR = Path("domain") / "generated"
ENUM_OUTPUT_FILE = GENERATED_DIR / "genre_id.py"
INDEX_OUTPUT_FILE = GENERATED_DIR / "genre_entries.py"

ENUM_CLASS_NAME = "GenreId"
ENUM_MODULE = "domain.generated.genre_id"

# Generation runs only when this variable is present in the environment
TOGGLE_ENV_VAR = "BUILD_GENRES"
