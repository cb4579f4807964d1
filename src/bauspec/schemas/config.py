"""Configuration schema: validates .bauspec.yml."""

from pathlib import PurePosixPath

from pydantic import BaseModel, field_validator

# Templates shipped in bauspec/templates
BUNDLED_TEMPLATES = (
    "constitution.md",
    "01-braindump.md",
    "02-prd.md",
    "03-architecture.md",
    "04-stories.md",
)


class BauspecConfig(BaseModel):
    """Project-level settings, all optional.

    ``specs_dir`` must be a relative path inside the project; feature templates must be names
    of bundled templates.
    """

    specs_dir: str = "specs"

    # Searched in order by ``bauspec add``
    specs_dir_candidates: list[str] = ["specs", "spec", "specifications"]

    # Architecture is project-level, so it is not copied per feature
    feature_templates: list[str] = ["01-braindump.md", "02-prd.md", "04-stories.md"]

    update_gitignore: bool = True

    @field_validator("specs_dir")
    @classmethod
    def check_specs_dir(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("specs_dir must not be empty")
        if PurePosixPath(v).is_absolute():
            raise ValueError(f"specs_dir must be relative to the project root: {v}")
        if ".." in PurePosixPath(v).parts:
            raise ValueError(f"specs_dir must stay inside the project root: {v}")
        return v

    @field_validator("specs_dir_candidates")
    @classmethod
    def check_candidates(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("At least one specs_dir candidate is required")
        return v

    @field_validator("feature_templates")
    @classmethod
    def check_feature_templates(cls, v: list[str]) -> list[str]:
        unknown = [name for name in v if name not in BUNDLED_TEMPLATES]
        if unknown:
            raise ValueError(f"Unknown feature template(s): {', '.join(unknown)}")
        return v
