"""Framework knowledge base.

Static metadata keyed by the exact framework display name the detector
produces (e.g. ``"Axum"``, ``"Next.js"``). Lookups never fail: unknown
names simply have no entry.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Mapping, Optional

from examine.core.models import FrameworkDetails

WEB = "Web Framework"
FRONTEND = "Frontend Framework"
BACKEND = "Backend Framework"
FULL_STACK = "Full-stack Framework"

FRAMEWORK_DETAILS: Dict[str, FrameworkDetails] = {
    # Rust
    "Axum": FrameworkDetails(
        WEB, ("Actix Web", "Warp", "Rocket"), True,
        "Fast, ergonomic web framework built on Tokio",
    ),
    "Actix Web": FrameworkDetails(
        WEB, ("Axum", "Warp", "Rocket"), True,
        "Powerful, pragmatic, and extremely fast web framework",
    ),
    "Rocket": FrameworkDetails(
        WEB, ("Axum", "Actix Web", "Warp"), True,
        "Type-safe, declarative web framework",
    ),
    "Warp": FrameworkDetails(
        WEB, ("Axum", "Actix Web", "Rocket"), False,
        "Composable web framework with filters",
    ),
    "Bevy": FrameworkDetails(
        "Game Engine", ("Amethyst", "ggez"), True,
        "Data-driven game engine built in Rust",
    ),
    "Clap (CLI)": FrameworkDetails(
        "CLI Framework", ("structopt", "argh"), True,
        "Command line argument parser",
    ),
    # JavaScript
    "React": FrameworkDetails(
        FRONTEND, ("Vue", "Angular", "Svelte"), True,
        "JavaScript library for building user interfaces",
    ),
    "Vue": FrameworkDetails(
        FRONTEND, ("React", "Angular", "Svelte"), True,
        "Progressive JavaScript framework for building UIs",
    ),
    "Angular": FrameworkDetails(
        FRONTEND, ("React", "Vue", "Svelte"), True,
        "Platform for building mobile and desktop web applications",
    ),
    "Svelte": FrameworkDetails(
        FRONTEND, ("React", "Vue", "Angular"), True,
        "Compile-time framework that disappears into vanilla JS",
    ),
    "Express": FrameworkDetails(
        BACKEND, ("Fastify", "Koa", "NestJS"), True,
        "Fast, unopinionated, minimalist web framework for Node.js",
    ),
    "Next.js": FrameworkDetails(
        FULL_STACK, ("Nuxt", "SvelteKit", "Remix"), True,
        "React framework for production with hybrid static & server rendering",
    ),
    "Nuxt": FrameworkDetails(
        FULL_STACK, ("Next.js", "SvelteKit", "Remix"), True,
        "Intuitive Vue framework for creating universal applications",
    ),
    # Go
    "Gin": FrameworkDetails(
        WEB, ("Echo", "Fiber", "Gorilla Mux"), True,
        "Fast HTTP web framework written in Go",
    ),
    "Echo": FrameworkDetails(
        WEB, ("Gin", "Fiber", "Gorilla Mux"), True,
        "High performance, extensible, minimalist Go web framework",
    ),
    "Fiber": FrameworkDetails(
        WEB, ("Gin", "Echo", "Gorilla Mux"), True,
        "Express inspired web framework built on Fasthttp",
    ),
    "Gorilla Mux": FrameworkDetails(
        WEB, ("Gin", "Echo", "Fiber"), False,
        "Powerful HTTP router and URL matcher for building Go web servers",
    ),
    # Python
    "Django": FrameworkDetails(
        WEB, ("Flask", "FastAPI", "Pyramid"), True,
        "High-level Python web framework that encourages rapid development",
    ),
    "Flask": FrameworkDetails(
        WEB, ("Django", "FastAPI", "Pyramid"), True,
        "Lightweight WSGI web application framework",
    ),
    "FastAPI": FrameworkDetails(
        WEB, ("Django", "Flask", "Starlette"), True,
        "Modern, fast web framework for building APIs with Python based on type hints",
    ),
    # Java
    "Spring Boot": FrameworkDetails(
        WEB, ("Quarkus", "Micronaut", "Jakarta EE"), True,
        "Opinionated Spring platform for stand-alone production applications",
    ),
    "Quarkus": FrameworkDetails(
        WEB, ("Spring Boot", "Micronaut", "Helidon"), True,
        "Kubernetes-native Java stack tailored for GraalVM and OpenJDK",
    ),
    "Micronaut": FrameworkDetails(
        WEB, ("Spring Boot", "Quarkus", "Helidon"), False,
        "JVM framework for modular microservices with compile-time DI",
    ),
    # PHP
    "Laravel": FrameworkDetails(
        WEB, ("Symfony", "CodeIgniter", "Slim"), True,
        "PHP web application framework with expressive, elegant syntax",
    ),
    "Symfony": FrameworkDetails(
        WEB, ("Laravel", "Laminas", "Slim"), True,
        "Set of reusable PHP components and a web application framework",
    ),
    # Ruby
    "Ruby on Rails": FrameworkDetails(
        WEB, ("Sinatra", "Hanami", "Roda"), True,
        "Full-stack web framework optimized for programmer happiness",
    ),
    "Sinatra": FrameworkDetails(
        WEB, ("Ruby on Rails", "Hanami", "Roda"), False,
        "DSL for quickly creating web applications in Ruby",
    ),
    # Dart
    "Flutter": FrameworkDetails(
        "UI Toolkit", ("React Native", "Xamarin", "Ionic"), True,
        "UI toolkit for natively compiled mobile, web and desktop apps",
    ),
    # Elixir
    "Phoenix": FrameworkDetails(
        WEB, ("Plug", "Sugar"), True,
        "Productive web framework that does not compromise speed or maintainability",
    ),
}

FRAMEWORK_POPULARITY: Dict[str, int] = {
    **dict.fromkeys(("React", "Express", "Django", "Flask"), 10),
    **dict.fromkeys(("Vue", "Angular", "Next.js", "FastAPI", "Gin"), 9),
    **dict.fromkeys(("Svelte", "Axum", "Actix Web", "Echo", "Fiber", "Nuxt"), 8),
    **dict.fromkeys(("Rocket", "Bevy", "Clap (CLI)"), 7),
    **dict.fromkeys(("Warp", "Gorilla Mux"), 5),
}
DEFAULT_POPULARITY = 3

ENTERPRISE_READY: FrozenSet[str] = frozenset({
    "React",
    "Vue",
    "Angular",
    "Express",
    "Next.js",
    "Django",
    "Flask",
    "FastAPI",
    "Gin",
    "Echo",
    "Actix Web",
    "Axum",
})

LEARNING_DIFFICULTY: Dict[str, int] = {
    **dict.fromkeys(("Express", "Flask", "Gin"), 2),
    **dict.fromkeys(("React", "Vue", "Echo", "Axum"), 3),
    **dict.fromkeys(("Next.js", "Svelte", "FastAPI", "Fiber"), 4),
    **dict.fromkeys(("Django", "Actix Web", "Rocket"), 5),
    "Nuxt": 6,
    "Bevy": 7,
    "Angular": 8,
}
DEFAULT_LEARNING_DIFFICULTY = 5

USE_CASES: Dict[str, List[str]] = {
    "React": [
        "Single Page Applications",
        "Mobile Apps (React Native)",
        "Desktop Apps (Electron)",
        "Static Sites",
    ],
    "Vue": [
        "Progressive Web Apps",
        "Single Page Applications",
        "Static Sites",
        "Mobile Apps",
    ],
    "Angular": [
        "Enterprise Applications",
        "Single Page Applications",
        "Progressive Web Apps",
        "Desktop Apps",
    ],
    "Express": [
        "REST APIs",
        "Web Applications",
        "Microservices",
        "Real-time Applications",
    ],
    "Django": [
        "Web Applications",
        "REST APIs",
        "CMS Systems",
        "E-commerce Sites",
    ],
    "FastAPI": [
        "REST APIs",
        "Microservices",
        "Machine Learning APIs",
        "Real-time Applications",
    ],
    "Axum": [
        "Web APIs",
        "Microservices",
        "High-performance Applications",
        "System Services",
    ],
    "Bevy": [
        "2D Games",
        "3D Games",
        "Simulations",
        "Interactive Applications",
    ],
}
DEFAULT_USE_CASES = ["Web Development"]


def get_framework_details(framework_name: str) -> Optional[FrameworkDetails]:
    """Look up built-in metadata for a framework.

    Args:
        framework_name: Exact, case-sensitive display name.

    Returns:
        FrameworkDetails, or None when the framework is not in the table.
    """
    return FRAMEWORK_DETAILS.get(framework_name)


def get_framework_popularity(framework_name: str) -> int:
    """Popularity score from 1 to 10, 10 being the most popular."""
    return FRAMEWORK_POPULARITY.get(framework_name, DEFAULT_POPULARITY)


def is_enterprise_ready(framework_name: str) -> bool:
    """Check if a framework is considered enterprise-ready."""
    return framework_name in ENTERPRISE_READY


def get_learning_difficulty(framework_name: str) -> int:
    """Rough learning difficulty from 1 to 10, 10 being the hardest."""
    return LEARNING_DIFFICULTY.get(framework_name, DEFAULT_LEARNING_DIFFICULTY)


def get_use_cases(framework_name: str) -> List[str]:
    """Common use cases for a framework.

    Returns a fresh list so callers may modify it.
    """
    return list(USE_CASES.get(framework_name, DEFAULT_USE_CASES))


class FrameworkKnowledgeBase:
    """Framework lookup with optional user-supplied entries.

    Entries from configuration take precedence over the built-in table,
    which lets users describe in-house or newer frameworks without a
    code change.
    """

    def __init__(self, extra: Optional[Mapping[str, FrameworkDetails]] = None):
        self._extra: Dict[str, FrameworkDetails] = dict(extra or {})

    @property
    def names(self) -> List[str]:
        """All framework names with metadata, built-in first."""
        names = list(FRAMEWORK_DETAILS)
        names.extend(name for name in self._extra if name not in FRAMEWORK_DETAILS)
        return names

    def lookup(self, framework_name: str) -> Optional[FrameworkDetails]:
        """Look up metadata for a framework name.

        Args:
            framework_name: Exact, case-sensitive display name.

        Returns:
            FrameworkDetails or None if unknown.
        """
        if framework_name in self._extra:
            return self._extra[framework_name]
        return get_framework_details(framework_name)
