"""Framework detection module.

Detects the primary application framework by looking up known dependency
keys in package manifests (Cargo.toml, package.json, go.mod,
requirements.txt, pyproject.toml, pom.xml, build.gradle, composer.json,
Gemfile, pubspec.yaml, mix.exs).

Each language has an ordered table of (dependency key, display name).
Sources are read in a fixed order and, within a source, the table order
decides: the first match wins and its declared version is captured.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from examine.core.logging import get_logger
from examine.core.models import Language
from examine.detection.manifests import read_json, read_text, read_toml, read_yaml

LOGGER = get_logger(__name__)


class DetectedFramework(NamedTuple):
    """A framework found in a project's dependency declarations."""

    name: str
    version: Optional[str] = None


FrameworkDetector = Callable[[Path], Optional[DetectedFramework]]

RUST_FRAMEWORKS: List[Tuple[str, str]] = [
    ("axum", "Axum"),
    ("actix-web", "Actix Web"),
    ("warp", "Warp"),
    ("rocket", "Rocket"),
    ("clap", "Clap (CLI)"),
    ("bevy", "Bevy"),
]

JS_FRAMEWORKS: List[Tuple[str, str]] = [
    ("react", "React"),
    ("vue", "Vue"),
    ("@angular/core", "Angular"),
    ("svelte", "Svelte"),
    ("express", "Express"),
    ("next", "Next.js"),
    ("nuxt", "Nuxt"),
]

GO_FRAMEWORKS: List[Tuple[str, str]] = [
    ("github.com/gin-gonic/gin", "Gin"),
    ("github.com/gorilla/mux", "Gorilla Mux"),
    ("github.com/labstack/echo", "Echo"),
    ("github.com/gofiber/fiber", "Fiber"),
]

PYTHON_FRAMEWORKS: List[Tuple[str, str]] = [
    ("django", "Django"),
    ("flask", "Flask"),
    ("fastapi", "FastAPI"),
]

# Java frameworks keyed by the artifact ids that identify them
JAVA_FRAMEWORKS: List[Tuple[Tuple[str, ...], str]] = [
    (
        (
            "spring-boot-starter-parent",
            "spring-boot-starter",
            "spring-boot-starter-web",
            "spring-boot",
        ),
        "Spring Boot",
    ),
    (("quarkus-bom", "quarkus-core", "quarkus-resteasy"), "Quarkus"),
    (("micronaut-bom", "micronaut-core", "micronaut-http-server-netty"), "Micronaut"),
]

PHP_FRAMEWORKS: List[Tuple[str, str]] = [
    ("laravel/framework", "Laravel"),
    ("symfony/framework-bundle", "Symfony"),
]

RUBY_FRAMEWORKS: List[Tuple[str, str]] = [
    ("rails", "Ruby on Rails"),
    ("sinatra", "Sinatra"),
]

DART_FRAMEWORKS: List[Tuple[str, str]] = [
    ("flutter", "Flutter"),
]

ELIXIR_FRAMEWORKS: List[Tuple[str, str]] = [
    ("phoenix", "Phoenix"),
]

# Comparator run followed by the version, e.g. "==4.2.0" or "~=0.68.0"
_REQUIREMENT_VERSION = re.compile(r"[<>=!~]+(.+)")
_REQUIREMENT_NAME = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)")
_GEM_LINE = re.compile(r"""^\s*gem\s+['"]([^'"]+)['"](.*)$""", re.MULTILINE)
_QUOTED = re.compile(r"""['"]([^'"]+)['"]""")
_MIX_DEP = re.compile(r"""\{\s*:(\w+)\s*,\s*"([^"]+)\"""")


def extract_version_from_requirement(requirement: str) -> Optional[str]:
    """Extract the version from a requirement specifier.

    ``"django==4.2.0"`` gives ``"4.2.0"``, ``"flask>=2.0.0"`` gives
    ``"2.0.0"``, ``"requests"`` gives None.

    Args:
        requirement: A single requirement line or PEP 508 string.

    Returns:
        Text after the first comparator run, or None.
    """
    # Drop environment markers ("; python_version < '3.10'")
    match = _REQUIREMENT_VERSION.search(requirement.split(";", 1)[0])
    if not match:
        return None
    version = match.group(1).strip()
    return version or None


def normalize_package_name(name: str) -> str:
    """Normalize a Python distribution name for comparison."""
    name = re.sub(r"\[.*?\]", "", name)
    return name.strip().lower().replace("_", "-")


def requirement_name(requirement: str) -> Optional[str]:
    """Return the normalized distribution name of a requirement line."""
    match = _REQUIREMENT_NAME.match(requirement)
    if not match:
        return None
    return normalize_package_name(match.group(1))


def _first_in_mapping(
    dependencies: Mapping[str, Any],
    table: Iterable[Tuple[str, str]],
    version_of: Callable[[Any], Optional[str]],
) -> Optional[DetectedFramework]:
    for key, display_name in table:
        if key in dependencies:
            return DetectedFramework(display_name, version_of(dependencies[key]))
    return None


def _toml_dependency_version(value: Any) -> Optional[str]:
    """Version of a Cargo/Poetry dependency: a string or a table's ``version``."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        version = value.get("version")
        return version if isinstance(version, str) else None
    return None


def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def detect_rust_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check Cargo.toml [dependencies]."""
    cargo = read_toml(project_root / "Cargo.toml")
    dependencies = cargo.get("dependencies") if cargo else None
    if not isinstance(dependencies, dict):
        return None
    return _first_in_mapping(dependencies, RUST_FRAMEWORKS, _toml_dependency_version)


def detect_javascript_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check package.json dependencies, then devDependencies."""
    package_json = read_json(project_root / "package.json")
    if package_json is None:
        return None
    for dep_type in ("dependencies", "devDependencies"):
        dependencies = package_json.get(dep_type)
        if not isinstance(dependencies, dict):
            continue
        found = _first_in_mapping(dependencies, JS_FRAMEWORKS, _string_or_none)
        if found:
            return found
    return None


def detect_go_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check go.mod for known module paths."""
    content = read_text(project_root / "go.mod")
    if content is None:
        return None
    for module, display_name in GO_FRAMEWORKS:
        if module in content:
            return DetectedFramework(display_name, _go_module_version(content, module))
    return None


def _go_module_version(content: str, module: str) -> Optional[str]:
    # Matches "github.com/gin-gonic/gin v1.9.0" and versioned paths like ".../echo/v4 v4.11.1"
    pattern = re.compile(rf"{re.escape(module)}(?:/v\d+)?\s+v(\d[^\s]*)")
    match = pattern.search(content)
    return match.group(1) if match else None


def detect_python_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check requirements.txt, then pyproject.toml (PEP 621 and Poetry)."""
    content = read_text(project_root / "requirements.txt")
    if content is not None:
        requirements = _parse_requirements_txt(content)
        found = _first_python_requirement(requirements)
        if found:
            return found

    pyproject = read_toml(project_root / "pyproject.toml")
    if pyproject is None:
        return None

    project_deps = _table(pyproject, "project").get("dependencies")
    if isinstance(project_deps, list):
        requirements = {}
        for dep in project_deps:
            if not isinstance(dep, str):
                continue
            name = requirement_name(dep)
            if name and name not in requirements:
                requirements[name] = dep.lower()
        found = _first_python_requirement(requirements)
        if found:
            return found

    poetry_deps = _table(pyproject, "tool", "poetry").get("dependencies")
    if isinstance(poetry_deps, dict):
        normalized = {normalize_package_name(k): v for k, v in poetry_deps.items()}
        return _first_in_mapping(normalized, PYTHON_FRAMEWORKS, _toml_dependency_version)

    return None


def _table(data: Mapping[str, Any], *keys: str) -> Mapping[str, Any]:
    """Walk nested TOML tables, returning an empty mapping on any mismatch."""
    current: Any = data
    for key in keys:
        current = current.get(key) if isinstance(current, dict) else None
    return current if isinstance(current, dict) else {}


def _parse_requirements_txt(content: str) -> Dict[str, str]:
    """Map normalized package names to their requirement lines.

    Args:
        content: requirements.txt file content.

    Returns:
        Dict of name -> lowercase requirement line, first declaration wins.
    """
    requirements: Dict[str, str] = {}
    for line in content.splitlines():
        line = line.split("#", 1)[0].strip()
        # Skip comments, empty lines and pip options (-r, -e, --index-url)
        if not line or line.startswith("-"):
            continue
        name = requirement_name(line)
        if name and name not in requirements:
            requirements[name] = line.lower()
    return requirements


def _first_python_requirement(requirements: Mapping[str, str]) -> Optional[DetectedFramework]:
    for package, display_name in PYTHON_FRAMEWORKS:
        if package in requirements:
            return DetectedFramework(
                display_name, extract_version_from_requirement(requirements[package])
            )
    return None


def detect_java_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check pom.xml, then build.gradle / build.gradle.kts."""
    pom = read_text(project_root / "pom.xml")
    if pom:
        found = _first_java_artifact(_parse_maven_pom(pom))
        if found:
            return found

    for gradle_file in ("build.gradle", "build.gradle.kts"):
        gradle = read_text(project_root / gradle_file)
        if gradle:
            found = _first_java_artifact(_parse_gradle_build(gradle))
            if found:
                return found
    return None


def _first_java_artifact(artifacts: Mapping[str, Optional[str]]) -> Optional[DetectedFramework]:
    for artifact_ids, display_name in JAVA_FRAMEWORKS:
        for artifact_id in artifact_ids:
            if artifact_id in artifacts:
                return DetectedFramework(display_name, artifacts[artifact_id])
    return None


def _parse_maven_pom(content: str) -> Dict[str, Optional[str]]:
    """Parse artifact ids and versions from pom.xml content.

    Regex-based: the parent block and every <dependency> block are read,
    property references like ``${spring.version}`` are left unresolved
    and reported as no version.

    Args:
        content: pom.xml file content.

    Returns:
        Dict of artifactId -> version (or None).
    """
    artifacts: Dict[str, Optional[str]] = {}
    blocks = re.findall(r"<parent>(.*?)</parent>", content, re.DOTALL)
    blocks += re.findall(r"<dependency>(.*?)</dependency>", content, re.DOTALL)
    for block in blocks:
        artifact_match = re.search(r"<artifactId>\s*([^<\s]+)\s*</artifactId>", block)
        if not artifact_match:
            continue
        version_match = re.search(r"<version>\s*([^<\s]+)\s*</version>", block)
        version = version_match.group(1) if version_match else None
        if version and version.startswith("$"):
            version = None
        artifacts.setdefault(artifact_match.group(1), version)
    return artifacts


def _parse_gradle_build(content: str) -> Dict[str, Optional[str]]:
    """Parse artifact ids and versions from a Gradle build file.

    Handles ``implementation 'group:artifact:version'`` and the
    parenthesized Kotlin DSL form, plus the Spring Boot and Quarkus
    plugin ids.

    Args:
        content: build.gradle or build.gradle.kts file content.

    Returns:
        Dict of artifactId -> version (or None).
    """
    artifacts: Dict[str, Optional[str]] = {}
    pattern = (
        r"(?:implementation|api|compileOnly|runtimeOnly|testImplementation)"
        r"\s*\(?\s*(?:platform\()?\s*['\"]([^'\"]+)['\"]"
    )
    for match in re.finditer(pattern, content):
        parts = match.group(1).split(":")
        if len(parts) >= 2:
            version = parts[2] if len(parts) >= 3 and parts[2] else None
            artifacts.setdefault(parts[1], version)

    plugin = re.search(
        r"""id\s*\(?\s*['"]org\.springframework\.boot['"]\s*\)?\s*version\s*['"]([^'"]+)['"]""",
        content,
    )
    if plugin:
        artifacts.setdefault("spring-boot", plugin.group(1))
    elif "org.springframework.boot" in content:
        artifacts.setdefault("spring-boot", None)
    if "io.quarkus" in content and not any(a.startswith("quarkus-") for a in artifacts):
        artifacts["quarkus-bom"] = None
    return artifacts


def detect_php_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check composer.json require."""
    composer = read_json(project_root / "composer.json")
    require = composer.get("require") if composer else None
    if not isinstance(require, dict):
        return None
    return _first_in_mapping(require, PHP_FRAMEWORKS, _string_or_none)


def detect_ruby_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check ``gem`` declarations in the Gemfile."""
    content = read_text(project_root / "Gemfile")
    if content is None:
        return None
    gems: Dict[str, Optional[str]] = {}
    for name, rest in _GEM_LINE.findall(content):
        constraint = _QUOTED.search(rest)
        gems.setdefault(name, constraint.group(1) if constraint else None)
    return _first_in_mapping(gems, RUBY_FRAMEWORKS, _string_or_none)


def detect_dart_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check pubspec.yaml dependencies."""
    pubspec = read_yaml(project_root / "pubspec.yaml")
    dependencies = pubspec.get("dependencies") if pubspec else None
    if not isinstance(dependencies, dict):
        return None
    # "flutter: {sdk: flutter}" carries no version
    return _first_in_mapping(dependencies, DART_FRAMEWORKS, _string_or_none)


def detect_elixir_framework(project_root: Path) -> Optional[DetectedFramework]:
    """Check ``{:dep, "~> x.y"}`` tuples in mix.exs."""
    content = read_text(project_root / "mix.exs")
    if content is None:
        return None
    deps = {}
    for name, requirement in _MIX_DEP.findall(content):
        deps.setdefault(name, requirement)
    return _first_in_mapping(deps, ELIXIR_FRAMEWORKS, _string_or_none)


# Every language has an entry; None means no framework tables exist for it.
FRAMEWORK_DETECTORS: Dict[Language, Optional[FrameworkDetector]] = {
    Language.RUST: detect_rust_framework,
    Language.JAVASCRIPT: detect_javascript_framework,
    Language.GO: detect_go_framework,
    Language.PYTHON: detect_python_framework,
    Language.JAVA: detect_java_framework,
    Language.PHP: detect_php_framework,
    Language.RUBY: detect_ruby_framework,
    Language.SWIFT: None,
    Language.DART: detect_dart_framework,
    Language.ELIXIR: detect_elixir_framework,
    Language.HASKELL: None,
    Language.CLOJURE: None,
    Language.CPP: None,
    Language.CSHARP: None,
}


def detect_framework(project_root: Path, language: Language) -> Optional[DetectedFramework]:
    """Detect the primary framework of a project.

    Args:
        project_root: Project root directory.
        language: Detected primary language.

    Returns:
        DetectedFramework, or None if no known framework is declared.
    """
    detect = FRAMEWORK_DETECTORS[language]
    if detect is None:
        return None
    found = detect(project_root)
    if found:
        LOGGER.debug(f"Framework: {found.name} (version {found.version})")
    return found
