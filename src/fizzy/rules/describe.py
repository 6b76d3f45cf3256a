from fizzy.rules.models import RuleSetSpec

_FALLBACK = "output the number itself as text"


def describe_ruleset(spec: RuleSetSpec) -> str:
    """Plain-English summary of what a rule set does to each number."""
    if not spec.rules:
        return f"For every number, {_FALLBACK}."
    sentences = [
        f'When {rule.condition.describe()}, append "{rule.substitution}".'
        for rule in spec.rules
    ]
    sentences.append(f"If nothing was appended, {_FALLBACK}.")
    return " ".join(sentences)
