"""Substitution rules applied to candidate lines before scoring."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from editrank.shared.log import debug, eprint


class MalformedRuleError(ValueError):
    """A substitution rules file that cannot be loaded as written."""


@dataclass(frozen=True)
class SubstitutionRule:
    pattern: str
    replacement: str = ""
    compiled: Optional[re.Pattern] = field(default=None, compare=False, repr=False)

    def apply(self, text: str) -> str:
        if self.compiled is not None:
            return self.compiled.sub(lambda _m: self.replacement, text)
        return text.replace(self.pattern, self.replacement)


@dataclass
class SubstitutionRuleSet:
    rules: List[SubstitutionRule] = field(default_factory=list)
    regex: bool = False

    def __len__(self) -> int:
        return len(self.rules)


def parse_rule_line(line: str, case_fold: bool = False, regex: bool = False) -> Optional[SubstitutionRule]:
    """Parse one ``match<TAB>replacement`` line.

    Returns None for lines that carry no rule (blank, or an empty match field).
    Raises MalformedRuleError for more than two tab-separated fields or an
    invalid pattern in regex mode.
    """
    line = line.rstrip("\r\n")
    if not line:
        return None
    fields = line.split("\t")
    if len(fields) > 2:
        raise MalformedRuleError(f"expected at most 2 tab-separated fields, got {len(fields)}")
    pattern = fields[0]
    replacement = fields[1] if len(fields) == 2 else ""
    if not pattern:
        return None

    compiled = None
    if regex:
        # Pattern keeps its case: \D and \d are different classes.
        flags = re.IGNORECASE if case_fold else 0
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise MalformedRuleError(f"invalid pattern {pattern!r}: {e}") from e
    elif case_fold:
        pattern = pattern.lower()
    return SubstitutionRule(pattern=pattern, replacement=replacement, compiled=compiled)


def load_rules(path: str, case_fold: bool = False, regex: bool = False) -> SubstitutionRuleSet:
    """Load rules from a tab-separated file, keeping file order."""
    rules: List[SubstitutionRule] = []
    with open(path, "r", encoding="utf-8") as f:
        try:
            lines = f.readlines()
        except UnicodeDecodeError as e:
            raise MalformedRuleError(f"{path}: not valid UTF-8: {e}") from e
    for lineno, line in enumerate(lines, start=1):
        try:
            rule = parse_rule_line(line, case_fold=case_fold, regex=regex)
        except MalformedRuleError as e:
            raise MalformedRuleError(f"{path}:{lineno}: {e}") from e
        if rule is None:
            if line.strip("\r\n"):
                eprint(f"[warn] {path}:{lineno}: skipping rule with empty match field")
            continue
        rules.append(rule)
    debug(f"loaded {len(rules)} substitution rule(s) from {path}")
    return SubstitutionRuleSet(rules=rules, regex=regex)


def apply_rules(rules: Optional[SubstitutionRuleSet], text: str) -> str:
    """Run every rule over the whole string, in order; each replaces all occurrences."""
    if not rules:
        return text
    for rule in rules.rules:
        text = rule.apply(text)
    return text
