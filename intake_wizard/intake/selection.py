# intake_wizard/intake/selection.py
from __future__ import annotations

from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from intake_wizard.intake.schema import UNKNOWN, Medication, Severity, Symptom
from intake_wizard.intake.stages import Category, TEXT_CATEGORIES


T = TypeVar("T")

ChangeListener = Callable[[Category, Tuple[Any, ...]], None]


class SelectionList(Generic[T]):
    """
    Ordered list of items for one category.

    ``key`` extracts the identity used for de-duplication; with no key
    every add is appended.
    """

    def __init__(self, key: Optional[Callable[[T], Any]] = None):
        self._items: List[T] = []
        self._key = key

    def add(self, item: T) -> bool:
        if self._key is not None:
            wanted = self._key(item)
            if any(self._key(existing) == wanted for existing in self._items):
                return False
        self._items.append(item)
        return True

    def remove(self, index: int) -> Optional[T]:
        if index < 0 or index >= len(self._items):
            return None
        return self._items.pop(index)

    def list(self) -> Tuple[T, ...]:
        return tuple(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class SelectionStore:
    """
    All user-built lists of the form, keyed by category.

    Lists are only reachable through the methods below. Every change that
    actually alters a list is reported to ``on_change`` with the new
    contents so the UI can redraw it.
    """

    def __init__(self, on_change: Optional[ChangeListener] = None):
        self._on_change = on_change
        self._lists: Dict[Category, SelectionList] = {
            Category.SYMPTOMS: SelectionList(key=lambda s: s.name),
            Category.MEDICATIONS: SelectionList(),
        }
        for category in TEXT_CATEGORIES:
            self._lists[category] = SelectionList(key=lambda value: value)

    # ------------------------------------------------------------------
    # Adding
    # ------------------------------------------------------------------

    def add(self, category: Category, value: str) -> bool:
        """
        Append a free-text item. Blank values and exact duplicates are ignored.
        """
        if category not in TEXT_CATEGORIES:
            raise ValueError(f"{category.value} does not hold free-text items")

        value = (value or "").strip()
        if not value:
            return False
        return self._add(category, value)

    def add_symptom(
        self,
        name: str,
        severity: Severity = Severity.MODERATE,
        duration: str = "",
    ) -> bool:
        name = (name or "").strip()
        if not name:
            return False

        symptom = Symptom(
            name=name,
            severity=severity,
            duration=(duration or "").strip() or UNKNOWN,
        )
        return self._add(Category.SYMPTOMS, symptom)

    def add_symptom_tag(self, name: str) -> bool:
        """Quick-tag shortcut: moderate severity, unknown duration."""
        return self.add_symptom(name, Severity.MODERATE, UNKNOWN)

    def add_medication(self, name: str, dose: str = "", frequency: str = "") -> bool:
        name = (name or "").strip()
        if not name:
            return False

        medication = Medication(
            name=name,
            dose=(dose or "").strip() or UNKNOWN,
            frequency=(frequency or "").strip() or UNKNOWN,
        )
        return self._add(Category.MEDICATIONS, medication)

    # ------------------------------------------------------------------
    # Removing / reading
    # ------------------------------------------------------------------

    def remove(self, category: Category, index: int) -> bool:
        removed = self._lists[category].remove(index)
        if removed is None:
            return False
        self._changed(category)
        return True

    def list(self, category: Category) -> Tuple[Any, ...]:
        return self._lists[category].list()

    def size(self, category: Category) -> int:
        return len(self._lists[category])

    def clear(self) -> None:
        for selection in self._lists.values():
            selection.clear()
        for category in Category:
            self._changed(category)

    @property
    def symptoms(self) -> Tuple[Symptom, ...]:
        return self.list(Category.SYMPTOMS)

    @property
    def medications(self) -> Tuple[Medication, ...]:
        return self.list(Category.MEDICATIONS)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _add(self, category: Category, item: Any) -> bool:
        added = self._lists[category].add(item)
        if added:
            self._changed(category)
        return added

    def _changed(self, category: Category) -> None:
        if self._on_change is not None:
            self._on_change(category, self.list(category))
