"""Extraction of ``@import`` rules from a stylesheet's rule list."""

from typing import Any, Callable, List, Optional, Tuple

from cssutils.css import CSSRule

IMPORT_RULE = CSSRule.IMPORT_RULE

def is_import_rule(rule: Any) -> bool:
    """Default rule-kind discriminator (``CSSRule.IMPORT_RULE``)."""
    return getattr(rule, 'type', None) == IMPORT_RULE

def get_rules(sheet: Any) -> List[Any]:
    """Return the rule list of a sheet, or an empty list if it has none."""
    rules = getattr(sheet, 'cssRules', None)
    if not rules:
        return []
    return list(rules)

def partition_rules(rules: List[Any],
                    is_import: Callable[[Any], bool] = is_import_rule
                    ) -> Tuple[List[Any], List[Any]]:
    """Split rules into import rules and everything else.

    Args:
        rules: Rules in source order
        is_import: Discriminator telling import rules apart

    Returns:
        Tuple of (import rules, other rules), each in source order
    """
    import_rules = []
    other_rules = []
    for rule in rules:
        if is_import(rule):
            import_rules.append(rule)
        else:
            other_rules.append(rule)
    return import_rules, other_rules

def get_import_href(rule: Any) -> Optional[str]:
    """Return the href of an import rule, None when it has no usable href."""
    href = getattr(rule, 'href', None)
    return href or None

def rules_to_text(rules: List[Any], separator: str = '\n') -> str:
    """Concatenate the serialized text of rules.

    Args:
        rules: Rules to serialize
        separator: Text placed between consecutive rules

    Returns:
        Joined CSS text
    """
    return separator.join(getattr(rule, 'cssText', '') or '' for rule in rules)

# Exported names
__all__ = [
    'IMPORT_RULE',
    'is_import_rule',
    'get_rules',
    'partition_rules',
    'get_import_href',
    'rules_to_text',
]
