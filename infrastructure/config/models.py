"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from infrastructure.constants import (
    ENUM_CLASS_NAME,
    ENUM_MODULE,
    ENUM_OUTPUT_FILE,
    HEADER_FILE,
    INDEX_OUTPUT_FILE,
    TAXONOMY_FILE,
    TOGGLE_ENV_VAR,
)


class GeneratorConfig(BaseModel):
    """
    Generation configuration.
    - Loaded from generator.yaml
    - Every field has a repo-root default, so an empty file is valid
    - Consumed by the generation pipeline and the CLI
    """

    taxonomy_file: Path = Field(
        default_factory=lambda: TAXONOMY_FILE,
        description="Taxonomy source document (.json, .yaml or .yml).",
    )
    header_file: Path = Field(
        default_factory=lambda: HEADER_FILE,
        description="Optional notice block prepended verbatim to generated files. Missing file means no header.",
    )
    enum_output: Path = Field(default_factory=lambda: ENUM_OUTPUT_FILE)
    index_output: Path = Field(default_factory=lambda: INDEX_OUTPUT_FILE)

    enum_class_name: str = Field(default=ENUM_CLASS_NAME, description="Name of the generated IntEnum class.")
    enum_module: str = Field(
        default=ENUM_MODULE,
        description="Import path of the generated enum module, used by the generated index module.",
    )
    toggle_env_var: str = Field(
        default=TOGGLE_ENV_VAR,
        description="Environment variable that enables generation when present.",
    )

    @field_validator("enum_class_name")
    @classmethod
    def _class_name_is_identifier(cls, v: str) -> str:
        v = v.strip()
        if not v.isidentifier():
            raise ValueError(f"enum_class_name must be a valid identifier, got {v!r}")
        return v

    @field_validator("enum_module")
    @classmethod
    def _module_is_dotted_path(cls, v: str) -> str:
        v = v.strip()
        if not v or not all(part.isidentifier() for part in v.split(".")):
            raise ValueError(f"enum_module must be a dotted import path, got {v!r}")
        return v

    @model_validator(mode="after")
    def _validate(self) -> "GeneratorConfig":
        if self.enum_output == self.index_output:
            raise ValueError("enum_output and index_output must be different files")
        if not self.toggle_env_var.strip():
            raise ValueError("toggle_env_var must not be empty")
        return self
