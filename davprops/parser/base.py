"""
Table driven property decoding.

A :class:`PropertyDecoder` maps fully qualified property keys
("{namespace}local-name") to rule functions.  Decoding a property mapping
runs the matching rule on each raw value and drops every key without a
rule, so servers are free to send properties we don't know about.
"""

from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterable
from typing import Mapping
from typing import Optional
from typing import Tuple

Rule = Callable[[Any], Any]


class PropertyDecoder:
    def __init__(
        self, rules: Optional[Iterable[Tuple[str, Rule]]] = None
    ) -> None:
        self._rules: Dict[str, Rule] = {}
        for key, rule in rules or ():
            self.register(key, rule)

    def register(self, key: str, rule: Rule) -> None:
        """Use ``rule`` for ``key``, replacing any previous rule."""
        self._rules[key] = rule

    def unregister(self, key: str) -> None:
        self._rules.pop(key, None)

    def can_decode(self, key: str) -> bool:
        return key in self._rules

    def keys(self):
        return self._rules.keys()

    def decode(self, props: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Decode raw properties into typed values.

        The result holds only keys with a registered rule, in the
        iteration order of ``props``.  ``props`` is not modified.
        """
        decoded: Dict[str, Any] = {}
        for key, value in props.items():
            rule = self._rules.get(key)
            if rule is None:
                continue
            decoded[key] = rule(value)
        return decoded

    __call__ = decode

    def chain(self, *others: "PropertyDecoder") -> "PropertyDecoder":
        """
        A new decoder knowing the rules of this one and all ``others``.

        On overlapping keys the rule from the later decoder wins.
        """
        combined = PropertyDecoder(self._rules.items())
        for other in others:
            for key, rule in other._rules.items():
                combined.register(key, rule)
        return combined

    def __repr__(self) -> str:
        return "%s(%d rules)" % (self.__class__.__name__, len(self._rules))
