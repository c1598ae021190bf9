"""License selection and report projection."""

from __future__ import annotations

from typing import Iterable

from core.domain.discipline import Discipline
from core.domain.errors import LicenseNotFoundError
from core.domain.models import License, Member, Summary
from core.logger import get_logger
from core.services.roster import PipelineHooks

logger = get_logger("licenses")


def select_license(member: Member, discipline: Discipline) -> License:
    """Return the member's license for `discipline`.

    Raises:
        LicenseNotFoundError: the member has no license with that category.
    """

    for license_ in member.licenses:
        if discipline.matches(license_.category):
            return license_
    raise LicenseNotFoundError(member.cust_id, discipline.value)


def format_number(value: float) -> str:
    """Render ratings without a trailing ``.0`` (``4.0`` -> ``4``)."""

    return format(value, "g")


def build_summary(member: Member, license_: License) -> Summary:
    return Summary(
        id=str(member.cust_id),
        name=member.display_name,
        irating=str(license_.irating),
        license=license_.group_name,
        sr=format_number(license_.safety_rating),
    )


def summarize(
    members: Iterable[Member],
    discipline: Discipline,
    *,
    skip_missing: bool = False,
    hooks: PipelineHooks | None = None,
) -> list[Summary]:
    """Project each member onto its `discipline` license.

    A member without that license aborts the run unless `skip_missing` is set,
    in which case it is left out and reported as a warning.
    """

    hooks = hooks or PipelineHooks()
    summaries: list[Summary] = []
    for member in members:
        try:
            license_ = select_license(member, discipline)
        except LicenseNotFoundError as exc:
            if not skip_missing:
                raise
            if hooks.warning:
                hooks.warning(f"skipped {member.display_name}: {exc}")
            else:
                logger.warning("Skipping %s: %s", member.display_name, exc)
            continue
        summaries.append(build_summary(member, license_))
    return summaries
