"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Isolation from STYLE_MIGRATE_* variables set in the developer shell
- Legacy and unified style document fixtures
"""

from __future__ import annotations

import copy
from typing import Any

import pytest
from dotenv import load_dotenv

from stylemigrate.config import EnvVar

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Document Data
# =============================================================================

LEGACY_CONFIG: dict[str, Any] = {
    "cover": {
        "components": [
            {
                "id": "cover-title",
                "type": "text",
                "content": "{storyTitle}",
                "x": 115,
                "y": 40,
                "position": "top",
                "horizontalPosition": "center",
                "style": {
                    "fontSize": "4rem",
                    "fontFamily": "Ribeye",
                    "fontWeight": "700",
                    "color": "#ffffff",
                    "padding": "2rem 3rem",
                    "backgroundColor": "rgba(0,0,0,0.1)",
                    "backdropFilter": "blur(3px)",
                    "borderRadius": "2rem",
                },
                "containerStyle": {
                    "verticalAlignment": "center",
                    "horizontalAlignment": "center",
                    "maxWidth": "85%",
                },
            }
        ]
    },
    "page": {
        "components": [
            {
                "id": "page-text",
                "type": "text",
                "content": "{pageText}",
                "x": 50,
                "y": 60,
                "position": "center",
                "horizontalPosition": "left",
                "style": {
                    "fontSize": "1.8rem",
                    "fontFamily": "Georgia",
                    "color": "#333333",
                    "textAlign": "justify",
                    "lineHeight": "1.6",
                },
            }
        ]
    },
}

UNIFIED_CONFIG: dict[str, Any] = {
    "version": "2.0",
    "designTokens": {
        "typography": {
            "title-large": {
                "fontFamily": "Ribeye",
                "fontSize": "4rem",
                "fontWeight": "700",
                "color": "#ffffff",
            },
            "text-medium": {
                "fontFamily": "Georgia",
                "fontSize": "1.8rem",
                "color": "#333333",
                "textAlign": "justify",
                "lineHeight": "1.6",
            },
        },
        "containers": {
            "glass-effect": {
                "backgroundColor": "rgba(0,0,0,0.1)",
                "backdropFilter": "blur(3px)",
                "borderRadius": "2rem",
                "padding": "2rem 3rem",
            }
        },
        "positioning": {
            "top-center": {
                "region": "top-center",
                "offset": {"x": 0, "y": 40},
                "constraints": {"maxWidth": "85%"},
            },
            "center-left": {
                "region": "center-left",
                "offset": {"x": 50, "y": 60},
            },
        },
    },
    "pageTypes": {
        "cover": {
            "background": {"type": "gradient", "colors": ["#ff6b6b", "#4ecdc4"]},
            "components": [
                {
                    "id": "cover-title",
                    "type": "text",
                    "content": "{storyTitle}",
                    "typography": "title-large",
                    "container": "glass-effect",
                    "positioning": "top-center",
                }
            ],
        },
        "page": {
            "background": {"type": "solid", "color": "#ffffff"},
            "components": [
                {
                    "id": "page-text",
                    "type": "text",
                    "content": "{pageText}",
                    "typography": "text-medium",
                    "positioning": "center-left",
                }
            ],
        },
    },
}


# =============================================================================
# Pytest Hooks
# =============================================================================


@pytest.fixture(autouse=True)
def _clean_style_migrate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against the documented configuration defaults."""
    for var in EnvVar:
        monkeypatch.delenv(var.value.name, raising=False)


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def legacy_config() -> dict[str, Any]:
    """A two page-type legacy document (cover title and page text).

    Returns:
        A fresh deep copy, safe to mutate.
    """
    return copy.deepcopy(LEGACY_CONFIG)


@pytest.fixture
def legacy_cover_title(legacy_config: dict[str, Any]) -> dict[str, Any]:
    """The fully styled cover title component of legacy_config."""
    return legacy_config["cover"]["components"][0]


@pytest.fixture
def unified_config() -> dict[str, Any]:
    """A hand-authored unified document with named tokens.

    Returns:
        A fresh deep copy, safe to mutate.
    """
    return copy.deepcopy(UNIFIED_CONFIG)


@pytest.fixture
def customized_legacy_config() -> dict[str, Any]:
    """A legacy document whose components carry user-defined fields."""
    return {
        "version": "1.0",
        "cover": {
            "background": {"type": "solid", "color": "#000000"},
            "components": [
                {
                    "id": "custom-title",
                    "type": "text",
                    "content": "Hello",
                    "style": {"fontSize": "3rem", "boxShadow": "0 0 4px #000"},
                    "animation": {"name": "fade-in", "duration": 300},
                    "locked": True,
                    "zIndex": 4,
                }
            ],
        },
    }


@pytest.fixture
def partially_migrated_config() -> dict[str, Any]:
    """A version 1.5 document that already carries some design tokens."""
    return {
        "version": "1.5",
        "designTokens": {
            "typography": {"heading": {"fontFamily": "Ribeye", "fontSize": "3rem"}},
            "containers": {},
            "positioning": {
                "header-slot": {"region": "top-center", "offset": {"x": 0, "y": 20}}
            },
        },
        "cover": {
            "components": [
                {
                    "id": "cover-title",
                    "type": "text",
                    "typography": "heading",
                    "positioning": "header-slot",
                },
                {
                    "id": "cover-subtitle",
                    "type": "text",
                    "position": "bottom",
                    "horizontalPosition": "right",
                    "style": {"color": "#ffffff", "padding": "1rem"},
                },
            ]
        },
    }
