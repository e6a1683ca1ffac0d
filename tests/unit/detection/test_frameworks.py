"""Tests for framework detection module."""

from __future__ import annotations

import json
from pathlib import Path

from examine.core.models import Language
from examine.detection.frameworks import (
    FRAMEWORK_DETECTORS,
    DetectedFramework,
    _parse_gradle_build,
    _parse_maven_pom,
    _parse_requirements_txt,
    detect_dart_framework,
    detect_elixir_framework,
    detect_framework,
    detect_go_framework,
    detect_java_framework,
    detect_javascript_framework,
    detect_php_framework,
    detect_python_framework,
    detect_ruby_framework,
    detect_rust_framework,
    extract_version_from_requirement,
    normalize_package_name,
    requirement_name,
)


class TestExtractVersionFromRequirement:
    """Tests for extract_version_from_requirement."""

    def test_pinned(self) -> None:
        assert extract_version_from_requirement("django==4.2.0") == "4.2.0"

    def test_minimum(self) -> None:
        assert extract_version_from_requirement("flask>=2.0.0") == "2.0.0"

    def test_compatible_release(self) -> None:
        assert extract_version_from_requirement("fastapi~=0.100") == "0.100"

    def test_no_comparator(self) -> None:
        assert extract_version_from_requirement("requests") is None

    def test_environment_marker_dropped(self) -> None:
        assert (
            extract_version_from_requirement("django==4.2 ; python_version < '3.10'")
            == "4.2"
        )

    def test_marker_without_version(self) -> None:
        assert extract_version_from_requirement("flask; python_version >= '3.8'") is None


class TestPackageNames:
    """Tests for requirement name helpers."""

    def test_normalize_package_name(self) -> None:
        assert normalize_package_name("Django") == "django"
        assert normalize_package_name("fastapi[all]") == "fastapi"
        assert normalize_package_name("Flask_Login") == "flask-login"

    def test_requirement_name(self) -> None:
        assert requirement_name("Django>=4.0") == "django"
        assert requirement_name("fastapi[all]==0.100") == "fastapi"
        assert requirement_name("  ") is None

    def test_parse_requirements_txt(self) -> None:
        content = "# deps\n-r base.txt\nDjango==4.2  # web\nflask-login>=0.6\n\n"
        assert _parse_requirements_txt(content) == {
            "django": "django==4.2",
            "flask-login": "flask-login>=0.6",
        }


class TestRustFramework:
    """Tests for detect_rust_framework."""

    def test_string_dependency(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text('[dependencies]\naxum = "0.7.4"\n')
        assert detect_rust_framework(tmp_path) == DetectedFramework("Axum", "0.7.4")

    def test_table_dependency(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text(
            '[dependencies]\nactix-web = { version = "4.4", features = ["macros"] }\n'
        )
        assert detect_rust_framework(tmp_path) == DetectedFramework("Actix Web", "4.4")

    def test_git_dependency_has_no_version(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text(
            '[dependencies]\nrocket = { git = "https://github.com/SergioBenitez/Rocket" }\n'
        )
        assert detect_rust_framework(tmp_path) == DetectedFramework("Rocket", None)

    def test_table_order_decides(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text('[dependencies]\nclap = "4"\naxum = "0.7"\n')
        assert detect_rust_framework(tmp_path).name == "Axum"

    def test_dev_dependencies_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text('[dev-dependencies]\naxum = "0.7"\n')
        assert detect_rust_framework(tmp_path) is None


class TestJavaScriptFramework:
    """Tests for detect_javascript_framework."""

    def test_react(self, tmp_path: Path) -> None:
        package = {"dependencies": {"react": "^18.2.0", "react-dom": "^18.2.0"}}
        (tmp_path / "package.json").write_text(json.dumps(package))
        assert detect_javascript_framework(tmp_path) == DetectedFramework("React", "^18.2.0")

    def test_react_wins_over_next(self, tmp_path: Path) -> None:
        package = {"dependencies": {"next": "14.0.0", "react": "18.2.0"}}
        (tmp_path / "package.json").write_text(json.dumps(package))
        assert detect_javascript_framework(tmp_path).name == "React"

    def test_dependencies_before_dev_dependencies(self, tmp_path: Path) -> None:
        package = {
            "dependencies": {"express": "4.18.2"},
            "devDependencies": {"react": "18.2.0"},
        }
        (tmp_path / "package.json").write_text(json.dumps(package))
        assert detect_javascript_framework(tmp_path).name == "Express"

    def test_dev_dependencies(self, tmp_path: Path) -> None:
        package = {"devDependencies": {"svelte": "^4.0.0"}}
        (tmp_path / "package.json").write_text(json.dumps(package))
        assert detect_javascript_framework(tmp_path) == DetectedFramework("Svelte", "^4.0.0")

    def test_scoped_angular(self, tmp_path: Path) -> None:
        package = {"dependencies": {"@angular/core": "17.0.0"}}
        (tmp_path / "package.json").write_text(json.dumps(package))
        assert detect_javascript_framework(tmp_path).name == "Angular"

    def test_malformed_package_json(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("{oops")
        assert detect_javascript_framework(tmp_path) is None


class TestGoFramework:
    """Tests for detect_go_framework."""

    def test_gin_version(self, tmp_path: Path) -> None:
        (tmp_path / "go.mod").write_text(
            "module svc\n\ngo 1.21\n\nrequire github.com/gin-gonic/gin v1.9.1\n"
        )
        assert detect_go_framework(tmp_path) == DetectedFramework("Gin", "1.9.1")

    def test_major_version_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "go.mod").write_text(
            "module svc\n\nrequire (\n\tgithub.com/labstack/echo/v4 v4.11.4\n)\n"
        )
        assert detect_go_framework(tmp_path) == DetectedFramework("Echo", "4.11.4")

    def test_no_framework(self, tmp_path: Path) -> None:
        (tmp_path / "go.mod").write_text("module svc\n\ngo 1.21\n")
        assert detect_go_framework(tmp_path) is None


class TestPythonFramework:
    """Tests for detect_python_framework."""

    def test_requirements_txt(self, tmp_path: Path) -> None:
        (tmp_path / "requirements.txt").write_text("django==4.2.0\n")
        assert detect_python_framework(tmp_path) == DetectedFramework("Django", "4.2.0")

    def test_requirements_without_version(self, tmp_path: Path) -> None:
        (tmp_path / "requirements.txt").write_text("Flask\n")
        assert detect_python_framework(tmp_path) == DetectedFramework("Flask", None)

    def test_priority_order_within_source(self, tmp_path: Path) -> None:
        (tmp_path / "requirements.txt").write_text("fastapi==0.100.0\ndjango==4.2\n")
        assert detect_python_framework(tmp_path).name == "Django"

    def test_exact_names_only(self, tmp_path: Path) -> None:
        (tmp_path / "requirements.txt").write_text("django-environ==0.11\nflask-cors\n")
        assert detect_python_framework(tmp_path) is None

    def test_requirements_before_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "requirements.txt").write_text("flask>=2.3\n")
        (tmp_path / "pyproject.toml").write_text('[project]\ndependencies = ["django>=4"]\n')
        assert detect_python_framework(tmp_path) == DetectedFramework("Flask", "2.3")

    def test_pep621_dependencies(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "api"\ndependencies = ["fastapi>=0.100.0", "uvicorn"]\n'
        )
        assert detect_python_framework(tmp_path) == DetectedFramework("FastAPI", "0.100.0")

    def test_poetry_dependencies(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.poetry.dependencies]\npython = "^3.11"\nDjango = "^5.0"\n'
        )
        assert detect_python_framework(tmp_path) == DetectedFramework("Django", "^5.0")

    def test_malformed_project_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('project = "oops"\n')
        assert detect_python_framework(tmp_path) is None


class TestJavaFramework:
    """Tests for detect_java_framework."""

    def test_spring_boot_parent(self, tmp_path: Path) -> None:
        (tmp_path / "pom.xml").write_text(
            "<project><parent>"
            "<groupId>org.springframework.boot</groupId>"
            "<artifactId>spring-boot-starter-parent</artifactId>"
            "<version>3.2.0</version>"
            "</parent></project>"
        )
        assert detect_java_framework(tmp_path) == DetectedFramework("Spring Boot", "3.2.0")

    def test_gradle_plugin(self, tmp_path: Path) -> None:
        (tmp_path / "build.gradle").write_text(
            "plugins {\n  id 'org.springframework.boot' version '3.1.5'\n}\n"
        )
        assert detect_java_framework(tmp_path) == DetectedFramework("Spring Boot", "3.1.5")

    def test_quarkus_dependency(self, tmp_path: Path) -> None:
        (tmp_path / "build.gradle.kts").write_text(
            'dependencies {\n  implementation("io.quarkus:quarkus-core:3.6.0")\n}\n'
        )
        assert detect_java_framework(tmp_path) == DetectedFramework("Quarkus", "3.6.0")

    def test_parse_maven_pom_skips_property_versions(self) -> None:
        content = (
            "<dependencies><dependency>"
            "<artifactId>micronaut-core</artifactId>"
            "<version>${micronaut.version}</version>"
            "</dependency></dependencies>"
        )
        assert _parse_maven_pom(content) == {"micronaut-core": None}

    def test_parse_gradle_build(self) -> None:
        content = "implementation 'com.google.guava:guava:32.1.3-jre'\napi 'org.slf4j:slf4j-api'\n"
        assert _parse_gradle_build(content) == {"guava": "32.1.3-jre", "slf4j-api": None}


class TestOtherFrameworks:
    """Tests for PHP, Ruby, Dart and Elixir framework detection."""

    def test_laravel(self, tmp_path: Path) -> None:
        (tmp_path / "composer.json").write_text('{"require": {"laravel/framework": "^10.10"}}')
        assert detect_php_framework(tmp_path) == DetectedFramework("Laravel", "^10.10")

    def test_rails(self, tmp_path: Path) -> None:
        (tmp_path / "Gemfile").write_text(
            "source 'https://rubygems.org'\ngem 'rails', '~> 7.1.0'\ngem 'puma'\n"
        )
        assert detect_ruby_framework(tmp_path) == DetectedFramework("Ruby on Rails", "~> 7.1.0")

    def test_sinatra_without_version(self, tmp_path: Path) -> None:
        (tmp_path / "Gemfile").write_text('gem "sinatra"\n')
        assert detect_ruby_framework(tmp_path) == DetectedFramework("Sinatra", None)

    def test_flutter_sdk_dependency(self, tmp_path: Path) -> None:
        (tmp_path / "pubspec.yaml").write_text(
            "name: app\ndependencies:\n  flutter:\n    sdk: flutter\n"
        )
        assert detect_dart_framework(tmp_path) == DetectedFramework("Flutter", None)

    def test_phoenix(self, tmp_path: Path) -> None:
        (tmp_path / "mix.exs").write_text(
            'defp deps do\n  [\n    {:phoenix, "~> 1.7.10"},\n    {:jason, "~> 1.2"}\n  ]\nend\n'
        )
        assert detect_elixir_framework(tmp_path) == DetectedFramework("Phoenix", "~> 1.7.10")


class TestDetectFramework:
    """Tests for detect_framework dispatch."""

    def test_covers_every_language(self) -> None:
        assert set(FRAMEWORK_DETECTORS) == set(Language)

    def test_language_without_tables(self, tmp_path: Path) -> None:
        (tmp_path / "Package.swift").write_text("")
        assert detect_framework(tmp_path, Language.SWIFT) is None

    def test_only_consults_own_language(self, tmp_path: Path) -> None:
        (tmp_path / "requirements.txt").write_text("django\n")
        assert detect_framework(tmp_path, Language.RUST) is None
        assert detect_framework(tmp_path, Language.PYTHON).name == "Django"
