# -*- coding: utf-8 -*-

import collections.abc
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .exc import ConfigError, UnknownRule
from .rules import RULES, Rule


RuleRef = Union[str, Rule]

# Keys accepted by `LintConfig.from_mapping`, camelCase variants are kept for
# configurations written for JavaScript tooling.
_KEYS = {
    "rules": "rules",
    "required_fields": "required_fields",
    "requiredFields": "required_fields",
    "specified_rules": "specified_rules",
    "specifiedRules": "specified_rules",
}


def resolve_rule(ref: RuleRef) -> Rule:
    """
    Get a rule function from its registered name.

    Callables are returned as is which allows using custom rules.

    Raises:
        UnknownRule: when ``ref`` is not a registered name.
    """
    if callable(ref):
        return ref
    try:
        return RULES[ref]
    except (KeyError, TypeError):
        raise UnknownRule(
            "Unknown rule %r, expected one of: %s"
            % (ref, ", ".join(sorted(RULES)))
        )


def _field_names(value: Any) -> Tuple[str, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(
        value, collections.abc.Iterable
    ):
        raise ConfigError(
            "required_fields must be a list of field names, got %r" % (value,)
        )
    names = tuple(value)
    for name in names:
        if not isinstance(name, str) or not name:
            raise ConfigError("Invalid required field name %r" % (name,))
    return names


class LintConfig:
    """
    Configuration of a lint run.

    All values are validated when the configuration is created so that
    invalid configurations are reported before any document is traversed.

    Args:
        rules: Rules to run, either registered names (see
            :data:`gql_lint.rules.RULES`) or rule functions. Defaults to all
            registered rules.
        required_fields: Ordered field names enforced by the
            ``required-fields`` rule.
        specified_rules: Also run the validation rules defined in the GraphQL
            specification. Their errors are listed first.

    Attributes:
        rules (Tuple[Rule, ...]): Resolved rule functions.
        required_fields (Tuple[str, ...]): Required field names.
        specified_rules (bool): Whether to run specification rules.

    Raises:
        UnknownRule: if a rule name is not registered.
        ConfigError: if ``required_fields`` is not a list of field names.
    """

    __slots__ = ("rules", "required_fields", "specified_rules")

    def __init__(
        self,
        rules: Optional[Iterable[RuleRef]] = None,
        required_fields: Iterable[str] = (),
        specified_rules: bool = False,
    ):
        self.rules = tuple(
            resolve_rule(ref)
            for ref in (RULES.values() if rules is None else rules)
        )
        self.required_fields = _field_names(required_fields)
        self.specified_rules = bool(specified_rules)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "LintConfig":
        """
        Build a configuration from a mapping, such as a decoded JSON or YAML
        configuration file.

        >>> config = LintConfig.from_mapping({
        ...     "rules": ["required-fields"],
        ...     "requiredFields": ["id"],
        ... })
        >>> config.required_fields
        ('id',)

        Raises:
            ConfigError: on unknown keys or when the same option is set
                through more than one key.
        """
        kwargs = {}  # type: Dict[str, Any]
        seen = {}  # type: Dict[str, str]
        for key, value in mapping.items():
            try:
                name = _KEYS[key]
            except KeyError:
                raise ConfigError("Unknown configuration key %r" % key)
            if name in seen:
                raise ConfigError(
                    "Configuration keys %r and %r both set %s"
                    % (seen[name], key, name)
                )
            seen[name] = key
            kwargs[name] = value
        return cls(**kwargs)

    def options(self) -> Dict[str, Any]:
        """
        Options passed to every rule when building its handlers.
        """
        return {"required_fields": self.required_fields}

    def __repr__(self) -> str:
        rules = ", ".join(
            getattr(rule, "__name__", repr(rule)) for rule in self.rules
        )
        return (
            "LintConfig(rules=[%s], required_fields=%r, specified_rules=%r)"
            % (rules, self.required_fields, self.specified_rules)
        )
