from .errors import ConfigurationError
from .patterns import CODE

DEFAULT_PREFIX = 'extracted_string%s'
DEFAULT_SUFFIX = '%s'

PLACEHOLDER = '%s'

CODE_REFERENCE = 'getResources().getString(R.string.%s)'
ACCESSOR_REFERENCE = 'ExtractedString.getString(R.string.%s)'
MARKUP_REFERENCE = '@string/%s'


def normalize_template(template, default):
    """Fall back to ``default`` and make sure the template ends with ``%s``."""
    if template is None:
        return default
    if not template.endswith(PLACEHOLDER):
        template += PLACEHOLDER
    return template


class NameGenerator:
    """Builds resource names and references from a running count.

    The suffix template is filled with the count first and the result is
    placed into the prefix template, so ``app_str`` / ``_v1`` with count 5
    gives ``app_str_v15``.
    """

    def __init__(self, prefix=None, suffix=None, use_accessor_class=False):
        self.prefix = normalize_template(prefix, DEFAULT_PREFIX)
        self.suffix = normalize_template(suffix, DEFAULT_SUFFIX)
        self.use_accessor_class = use_accessor_class
        # fail early on templates '%' formatting cannot apply
        self.resource_name(0)

    def resource_name(self, count: int) -> str:
        try:
            return self.prefix % (self.suffix % count)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f'invalid name template prefix={self.prefix!r} suffix={self.suffix!r}'
            ) from e

    def reference(self, kind, name: str) -> str:
        if kind == CODE:
            template = ACCESSOR_REFERENCE if self.use_accessor_class else CODE_REFERENCE
            return template % name
        return MARKUP_REFERENCE % name
