"""``jsonaccess-probe``: read one field of a JSON document from the shell.

Arguments are chz-style ``name=value`` pairs::

    jsonaccess-probe path=config.json key=port tag=uint32 coerce=True
"""

from __future__ import annotations

import sys

import chz

from .coerce import extract_from_numeric_or_string
from .config import configured
from .document import load_document
from .errors import DocumentLoadError, JsonAccessError
from .extract import extract
from .runtime.logging import configure_logging
from .tags import tag_from_name
from .validate import is_valid


@chz.chz
class Probe:
    path: str = chz.field(doc="JSON document to load.")
    key: str = chz.field(doc="Top-level field to read.")
    tag: str = chz.field(default="string", doc="Type tag name, e.g. int64.")
    coerce: bool = chz.field(default=False, doc="Parse numbers stored as text.")
    debug: bool = chz.field(default=False, doc="Enable diagnostics.")

    def run(self) -> str:
        tag = tag_from_name(self.tag)
        document = load_document(self.path)
        with configured(debug_checks=self.debug):
            if self.coerce:
                value = extract_from_numeric_or_string(document, self.key, None, tag)
            else:
                value = extract(document, self.key, None, tag)
            valid = is_valid(document, self.key, tag)
        if value is None:
            return f"{self.key}: <default> (valid={valid})"
        return f"{self.key}: {value!r} (valid={valid})"


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    probe = chz.entrypoint(Probe, argv=argv)
    try:
        print(probe.run())
    except DocumentLoadError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except JsonAccessError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
