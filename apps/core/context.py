from dataclasses import dataclass

from .labels import DEFAULT_LANGUAGE, labels_for, normalize_language

LANGUAGE_COOKIE = 'lang'


@dataclass(frozen=True)
class UIContext:
    """Per-request UI state handed explicitly to views and templates"""
    lang: str = DEFAULT_LANGUAGE
    district: str = ''

    @classmethod
    def from_request(cls, request, district_param='district'):
        lang = normalize_language(request.COOKIES.get(LANGUAGE_COOKIE))
        district = request.GET.get(district_param, '').strip()
        return cls(lang=lang, district=district)

    @property
    def labels(self):
        return labels_for(self.lang)

    def template_context(self, **extra):
        context = {'ui': self, 'labels': self.labels}
        context.update(extra)
        return context
