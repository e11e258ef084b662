"""Convention-based classification registry with auto-discovery.

Each schema family is a Python package under ``finreport/domains/`` with a
``__domain__.py`` manifest that exposes a ``profile`` attribute of type
``ClassificationProfile``.

Usage::

    from finreport.domains.registry import get_registry

    registry = get_registry()
    reit = registry.get("reit")
    print(reit.titles.final_thesis)        # "REIT Investment Thesis"
    print(reit.fingerprint(Stage.THESIS))  # ("company", "window", "reit_thesis")
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import Any

from finreport.models import Classification, Stage

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionTitles:
    """Display titles for the four fixed sections."""

    multi_year_analysis: str
    management_credibility: str
    predictive_inference: str
    final_thesis: str

    def for_stage(self, stage: Stage) -> str:
        return getattr(self, stage.value)


@dataclass(frozen=True)
class ClassificationProfile:
    """Manifest for one schema family.

    ``schemas`` holds ``module.path:ClassName`` references per stage, loaded
    lazily via :meth:`schema_for`.
    """

    name: str
    display_name: str
    titles: SectionTitles
    fingerprints: dict[Stage, tuple[str, ...]]
    description: str = ""
    schemas: dict[Stage, str] = field(default_factory=dict)

    @property
    def classification(self) -> Classification:
        return Classification(self.name)

    def fingerprint(self, stage: Stage) -> tuple[str, ...]:
        """Minimal top-level keys identifying *stage* payloads of this family."""
        return self.fingerprints[stage]

    def schema_for(self, stage: Stage) -> Any:
        """Lazy-import and return the payload model class for *stage*.

        Raises:
            ValueError: If no schema is configured for the stage.
            ImportError: If the module/object cannot be found.
        """
        dotted = self.schemas.get(stage, "")
        if not dotted:
            raise ValueError(f"Classification {self.name!r} has no schema for {stage.value!r}")
        return _import_dotted_path(dotted)


class ClassificationRegistry:
    """Registry of discovered classification profiles.

    Profiles are registered either manually via :meth:`register` or
    automatically via :meth:`auto_discover`, which scans
    ``finreport.domains`` sub-packages for ``__domain__.py`` manifests.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, ClassificationProfile] = {}

    def register(self, profile: ClassificationProfile) -> None:
        """Register a classification profile."""
        if profile.name in self._profiles:
            log.warning("Classification %r already registered, overwriting", profile.name)
        self._profiles[profile.name] = profile
        log.debug("Registered classification: %s", profile.name)

    def get(self, name: str) -> ClassificationProfile:
        """Get a profile by name.

        Raises:
            KeyError: If the classification is not registered.
        """
        if name not in self._profiles:
            raise KeyError(
                f"Classification {name!r} not found. "
                f"Available: {sorted(self._profiles.keys())}"
            )
        return self._profiles[name]

    def lookup(self, classification: Any) -> ClassificationProfile:
        """Resolve *classification* to a profile, falling back to ``general``.

        Never raises for unknown values; the general family is always
        registered by auto-discovery.
        """
        resolved = Classification.coerce(classification)
        if resolved is Classification.GENERAL and not _names_general(classification):
            log.warning(
                "Unrecognized classification %r, using the general title table",
                classification,
            )
        return self.get(resolved.value)

    def list_profiles(self) -> list[ClassificationProfile]:
        """Return all registered profiles, sorted by name."""
        return sorted(self._profiles.values(), key=lambda p: p.name)

    def has(self, name: str) -> bool:
        """Check if a classification is registered."""
        return name in self._profiles

    def auto_discover(self) -> None:
        """Scan ``finreport.domains`` sub-packages for ``__domain__`` manifests.

        Each sub-package is expected to have a ``__domain__.py`` module with a
        module-level ``profile`` attribute of type :class:`ClassificationProfile`.
        """
        import finreport.domains as domains_pkg

        for _importer, modname, ispkg in pkgutil.iter_modules(
            domains_pkg.__path__, prefix="finreport.domains."
        ):
            if not ispkg:
                continue

            manifest_name = f"{modname}.__domain__"
            try:
                mod = importlib.import_module(manifest_name)
            except ImportError:
                log.debug("No __domain__.py in %s, skipping", modname)
                continue

            profile = getattr(mod, "profile", None)
            if not isinstance(profile, ClassificationProfile):
                log.warning(
                    "%s.__domain__.profile is not a ClassificationProfile, skipping",
                    modname,
                )
                continue

            self.register(profile)

        log.debug(
            "Auto-discovered %d classification(s): %s",
            len(self._profiles),
            ", ".join(sorted(self._profiles.keys())),
        )


# ── Module-level singleton ──────────────────────────────────────────

_global_registry: ClassificationRegistry | None = None


def get_registry() -> ClassificationRegistry:
    """Return the global registry, auto-discovering on first call."""
    global _global_registry
    if _global_registry is None:
        _global_registry = ClassificationRegistry()
        _global_registry.auto_discover()
    return _global_registry


# ── Internal helpers ────────────────────────────────────────────────


def _names_general(value: Any) -> bool:
    return isinstance(value, str) and value.strip().lower() == Classification.GENERAL.value


def _import_dotted_path(dotted: str) -> Any:
    """Import ``module.path:ClassName`` or ``module.path.attr``."""
    if ":" in dotted:
        module_path, obj_name = dotted.rsplit(":", 1)
    elif "." in dotted:
        module_path, obj_name = dotted.rsplit(".", 1)
    else:
        return importlib.import_module(dotted)

    mod = importlib.import_module(module_path)
    return getattr(mod, obj_name)
