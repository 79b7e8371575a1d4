"""Application-level constants."""

# Keys for serialized catalog records
ID_KEY = "id"
NAME_KEY = "name"
GENRE_TYPE_KEY = "genre_type"
PARENT_ID_KEY = "parent_id"
GENRE_ID_STR_KEY = "genre_id_str"
SUBGENRES_KEY = "subgenres"

# Query subcommands exposed by the CLI
QUERY_ALL = "all"
QUERY_GENRES = "genres"
QUERY_SUBGENRES = "subgenres"
QUERY_FIND = "find"
QUERY_NAME = "name"
QUERY_VALID = "valid"
QUERY_TREE = "tree"

QUERIES_WITH_ID = (QUERY_SUBGENRES, QUERY_FIND, QUERY_NAME, QUERY_VALID)
QUERY_CHOICES = (QUERY_ALL, QUERY_GENRES, QUERY_TREE) + QUERIES_WITH_ID

# Log output
LOG_DIR = "logs"
LOG_FILENAME = "generate.log"
