import re

# name, then an optional value: double-quoted, single-quoted or bare
_ATTRIBUTE_PATTERN = re.compile(
    r"""([^\s"'>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?"""
)


def parse_attributes(tag_text: str) -> dict[str, str]:
    """Split the attribute text of a start tag into a name -> value mapping.

    Accepts either the full tag (``<script type="x">``) or only its attribute
    text. Names are lower-cased, bare attributes map to an empty string and
    the first occurrence of a repeated name wins. Values are left as written.
    """
    text = tag_text.strip()
    if text[:7].lower() == "<script":
        text = text[7:]
    if text.endswith("/>"):
        text = text[:-2]
    elif text.endswith(">"):
        text = text[:-1]

    attributes: dict[str, str] = {}
    for m in _ATTRIBUTE_PATTERN.finditer(text):
        name = m.group(1).lower()
        if name in attributes:
            continue
        value = next((g for g in m.groups()[1:] if g is not None), "")
        attributes[name] = value
    return attributes
