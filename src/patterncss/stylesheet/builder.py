"""RuleBuilder: accumulates CSS rule fragments for one generator call."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from patterncss.stylesheet.model import CSSRule, filter_properties


class RuleBuilder:
    """Collects CSS text fragments in emission order.

    Rules whose properties are all empty are dropped. Base boilerplate
    added through :meth:`add_base_once` is written at most once per
    builder, keyed by name.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._rules: list[CSSRule] = []
        self._base_keys: set[str] = set()

    def add_rule(self, selector: str, properties: Mapping[str, Any]) -> RuleBuilder:
        """Append ``selector { ... }`` unless no property has a usable value."""
        filtered = filter_properties(properties)
        if not filtered:
            return self
        rule = CSSRule(selector=selector, properties=filtered)
        self._rules.append(rule)
        self._fragments.append(rule.render())
        return self

    def add_base_once(self, key: str, css: str) -> RuleBuilder:
        """Append *css* verbatim the first time *key* is seen."""
        if key not in self._base_keys:
            self._base_keys.add(key)
            self._fragments.append(css)
        return self

    def has_base(self, key: str) -> bool:
        return key in self._base_keys

    @property
    def rules(self) -> tuple[CSSRule, ...]:
        """Structured rules added via :meth:`add_rule` (base CSS excluded)."""
        return tuple(self._rules)

    def build(self) -> str:
        """Join every fragment with a newline, in emission order."""
        return "\n".join(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)
