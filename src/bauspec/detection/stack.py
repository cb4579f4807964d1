"""Stack detection: infer a project's tech stack from marker files.

Every category is an ordered table of :class:`Rule` entries evaluated
first-match-wins, so more specific entries (meta-frameworks, hosted
databases) must come before the generic ones they build on.  Auxiliary
tools are grouped instead: each group is first-match-wins on its own,
groups are independent of each other.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path

from bauspec.schemas.stack import DetectedStack, Language
from bauspec.shared.project_reader import JsonDocument, ProjectReader

logger = logging.getLogger(__name__)

MANIFEST = "package.json"
TSCONFIG = "tsconfig.json"
PYTHON_REQUIREMENTS = ("requirements.txt", "pyproject.toml")

STRICT_MODE_TOOL = "TypeScript strict mode"


@dataclass(frozen=True)
class Evidence:
    """What the rules can look at: marker paths, dependency names and,
    for Python projects, the lowercased text of the dependency listings."""

    reader: ProjectReader
    dependency_names: frozenset[str] = frozenset()
    versions: dict[str, str] = dataclasses.field(default_factory=dict)
    python_requirements: str = ""

    @classmethod
    def from_manifest(cls, reader: ProjectReader, manifest: JsonDocument) -> "Evidence":
        runtime = manifest.mapping("dependencies")
        dev = manifest.mapping("devDependencies")
        # Presence is all that matters; a runtime version wins for display.
        versions = {**dev, **runtime}
        return cls(
            reader=reader,
            dependency_names=frozenset(runtime) | frozenset(dev),
            versions={name: v for name, v in versions.items() if isinstance(v, str)},
        )

    def with_python_requirements(self) -> "Evidence":
        texts = (self.reader.read_text(name) or "" for name in PYTHON_REQUIREMENTS)
        return dataclasses.replace(self, python_requirements="\n".join(texts).lower())

    def has_dependency(self, name: str) -> bool:
        return name in self.dependency_names


@dataclass(frozen=True)
class Rule:
    """Yields ``label`` when any dependency, requirement substring or marker path is present."""

    label: str
    deps: tuple[str, ...] = ()
    requirements: tuple[str, ...] = ()
    markers: tuple[str, ...] = ()
    with_version: bool = False  # append the first dependency's version to the label

    def matches(self, evidence: Evidence) -> bool:
        return (
            any(evidence.has_dependency(dep) for dep in self.deps)
            or any(req in evidence.python_requirements for req in self.requirements)
            or any(evidence.reader.exists(marker) for marker in self.markers)
        )

    def resolve(self, evidence: Evidence) -> str:
        if self.with_version and self.deps:
            version = evidence.versions.get(self.deps[0], "")
            version = version.replace("^", "", 1).replace("~", "", 1)
            if version:
                return f"{self.label} {version}"
        return self.label


# ---------------------------------------------------------------------------
# Rule tables: order is priority
# ---------------------------------------------------------------------------

PACKAGE_MANAGER_RULES: tuple[Rule, ...] = (
    Rule("bun", markers=("bun.lockb",)),
    Rule("pnpm", markers=("pnpm-lock.yaml",)),
    Rule("yarn", markers=("yarn.lock",)),
    Rule("npm", markers=("package-lock.json",)),
)

LANGUAGE_RULES: tuple[Rule, ...] = (
    Rule(Language.TYPESCRIPT, deps=("typescript",), markers=(TSCONFIG,)),
    Rule(Language.JAVASCRIPT, markers=(MANIFEST,)),
    Rule(Language.PYTHON, markers=PYTHON_REQUIREMENTS),
    Rule(Language.GO, markers=("go.mod",)),
    Rule(Language.RUST, markers=("Cargo.toml",)),
)

FRAMEWORK_RULES: tuple[Rule, ...] = (
    Rule("Next.js", deps=("next",), with_version=True),
    Rule("Nuxt", deps=("nuxt",)),
    Rule("Remix", deps=("@remix-run/node", "remix")),
    Rule("SvelteKit", deps=("svelte", "@sveltejs/kit")),
    Rule("Astro", deps=("astro",)),
    Rule("Express", deps=("express",)),
    Rule("Fastify", deps=("fastify",)),
    Rule("React (CRA/Vite)", deps=("react",)),
    Rule("Vue", deps=("vue",)),
)

PYTHON_FRAMEWORK_RULES: tuple[Rule, ...] = (
    Rule("Django", requirements=("django",), markers=("manage.py",)),
    Rule("FastAPI", requirements=("fastapi",)),
    Rule("Flask", requirements=("flask",)),
)

STYLING_RULES: tuple[Rule, ...] = (
    Rule("Tailwind CSS", deps=("tailwindcss",), markers=("tailwind.config.js", "tailwind.config.ts")),
    Rule("styled-components", deps=("styled-components",)),
    Rule("Emotion", deps=("@emotion/react",)),
)

DATABASE_RULES: tuple[Rule, ...] = (
    Rule("Supabase (Postgres)", deps=("@supabase/supabase-js",)),
    Rule("Prisma", deps=("@prisma/client",), markers=("prisma/schema.prisma",)),
    Rule("Drizzle ORM", deps=("drizzle-orm",)),
    Rule("MongoDB (Mongoose)", deps=("mongoose",)),
    Rule("PostgreSQL (pg)", deps=("pg",)),
    Rule("SQLite", deps=("better-sqlite3",)),
)

AUTH_RULES: tuple[Rule, ...] = (
    Rule("Supabase Auth", deps=("@supabase/ssr", "@supabase/auth-helpers-nextjs")),
    Rule("NextAuth / Auth.js", deps=("next-auth", "@auth/core")),
    Rule("Clerk", deps=("@clerk/nextjs",)),
    Rule("Lucia Auth", deps=("lucia",)),
    Rule("Passport.js", deps=("passport",)),
)

DEPLOYMENT_RULES: tuple[Rule, ...] = (
    Rule("Vercel", markers=("vercel.json", ".vercel")),
    Rule("Netlify", markers=("netlify.toml",)),
    Rule("Fly.io", markers=("fly.toml",)),
    Rule("Docker", markers=("Dockerfile",)),
    Rule("Railway", markers=("railway.json",)),
)

TOOL_GROUPS: tuple[tuple[Rule, ...], ...] = (
    # Validation
    (Rule("Zod", deps=("zod",)),),
    (Rule("Joi", deps=("joi",)),),
    # Unit testing: one runner at most
    (Rule("Vitest", deps=("vitest",)), Rule("Jest", deps=("jest",))),
    # E2E
    (Rule("Playwright", deps=("@playwright/test",)),),
    (Rule("Cypress", deps=("cypress",)),),
)


def first_match(rules: tuple[Rule, ...], evidence: Evidence) -> str | None:
    """Return the label of the first matching rule, or None."""
    for rule in rules:
        if rule.matches(evidence):
            return rule.resolve(evidence)
    return None


def _strict_typescript(reader: ProjectReader) -> bool:
    tsconfig = reader.read_json(TSCONFIG)
    return tsconfig.found and tsconfig.mapping("compilerOptions").get("strict") is True


def detect_stack(project_root: str | Path) -> DetectedStack:
    """Inspect ``project_root`` and return everything that could be inferred.

    Never raises for missing or malformed files: they just leave fields unset.
    """
    reader = ProjectReader(project_root)
    evidence = Evidence.from_manifest(reader, reader.read_json(MANIFEST))
    tools: list[str] = []

    language = first_match(LANGUAGE_RULES, evidence)
    if language is Language.TYPESCRIPT and _strict_typescript(reader):
        tools.append(STRICT_MODE_TOOL)

    framework = first_match(FRAMEWORK_RULES, evidence)
    if language is Language.PYTHON:
        framework = first_match(PYTHON_FRAMEWORK_RULES, evidence.with_python_requirements()) or framework

    for group in TOOL_GROUPS:
        tool = first_match(group, evidence)
        if tool:
            tools.append(tool)

    detected = DetectedStack(
        language=language,
        framework=framework,
        styling=first_match(STYLING_RULES, evidence),
        database=first_match(DATABASE_RULES, evidence),
        auth=first_match(AUTH_RULES, evidence),
        deployment=first_match(DEPLOYMENT_RULES, evidence),
        package_manager=first_match(PACKAGE_MANAGER_RULES, evidence),
        stack=tuple(tools),
    )
    logger.debug("Detected stack for %s: %s", reader.root, detected.model_dump(exclude_defaults=True))
    return detected
