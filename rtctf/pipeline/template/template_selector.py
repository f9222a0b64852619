"""Template selector: picks result, context, criteria and format fragments from classification signals."""

import logging
from dataclasses import dataclass

from rtctf.models.domain import ClassificationSignals
from rtctf.models.enums import Intent
from rtctf.pipeline.template.methodology_template import TemplateSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedFragments:
    result: str
    context: str
    criteria: tuple[str, ...]
    format: str


def select_fragments(template_set: TemplateSet, signals: ClassificationSignals) -> ResolvedFragments:
    # 1. Intent → result + format, DEFAULT when unmatched
    result = template_set.results.get(signals.intent, template_set.results[Intent.DEFAULT])
    fmt = template_set.formats.get(signals.intent, template_set.formats[Intent.DEFAULT])

    # 2. Primary domain → context
    primary = signals.primary_domain
    if primary is not None and primary in template_set.contexts:
        context = template_set.contexts[primary]
    else:
        context = template_set.default_context

    # 3. Base criteria + union of every matched domain's extras, in priority order
    criteria = list(template_set.base_criteria)
    for domain in signals.ordered_domains():
        for item in template_set.domain_criteria.get(domain, ()):
            if item not in criteria:
                criteria.append(item)

    logger.debug(
        "[TemplateSelector] language=%s intent=%s primary_domain=%s criteria=%d",
        template_set.language.value,
        signals.intent.value,
        primary.value if primary else None,
        len(criteria),
    )

    return ResolvedFragments(
        result=result,
        context=context,
        criteria=tuple(criteria),
        format=fmt,
    )
