"""Display metadata for candidate domains.

Every ``Domain`` member has an entry; unknown codes resolve to ``OTHER`` and
keep their raw code as the label.
"""

from pydantic import BaseModel

from recruit.models.enums import Domain


class DomainDisplay(BaseModel):
    """Label and badge color for a domain code."""
    code: str
    label: str
    color: str


_DOMAIN_LABELS: dict[Domain, tuple[str, str]] = {
    Domain.DS: ("Data Science", "blue"),
    Domain.WD: ("Web Development", "green"),
    Domain.ML: ("Machine Learning", "purple"),
    Domain.UI: ("UI/UX Design", "pink"),
    Domain.BE: ("Backend Engineering", "orange"),
    Domain.OTHER: ("Other", "gray"),
}


def domain_display(code: str | None) -> DomainDisplay:
    """Return the label/color pair for *code*.

    >>> domain_display("DS").label
    'Data Science'
    >>> domain_display("QA").label
    'QA'
    """
    domain = Domain.parse(code)
    label, color = _DOMAIN_LABELS[domain]
    if domain is Domain.OTHER and code:
        label = code
    return DomainDisplay(code=code or "", label=label, color=color)
