"""
📜 Script Builder
Renders AppleScript bodies from operation descriptors.

Parameter values never touch the script text. Each value is passed to
osascript as one argv element and the script reads it back with
`my argText(argv, N)` inside an `on run argv` handler.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from string import Template
from typing import Any, Mapping, Optional

from ..errors import ScriptValueError, UnknownOperationError

# Every argv element is prefixed so none of them can be read as an osascript
# option; argText strips it again.
ARG_PREFIX = "="
ISO_DATE_PREFIX = "iso:"

PARAM_KINDS = ("text", "integer", "date")

# ─── Shared Handlers ──────────────────────────────────────────────────────────
# Appended to every script. Field escaping must match codec.escape().

PRELUDE_HANDLERS = """\
on argText(theArgs, n)
	set theText to item n of theArgs
	if length of theText is 1 then return ""
	return text 2 thru -1 of theText
end argText

on replaceText(theText, searchString, replacementString)
	set savedDelimiters to AppleScript's text item delimiters
	set AppleScript's text item delimiters to searchString
	set textItems to text items of theText
	set AppleScript's text item delimiters to replacementString
	set theText to textItems as text
	set AppleScript's text item delimiters to savedDelimiters
	return theText
end replaceText

on joinList(theItems, theDelimiter)
	set savedDelimiters to AppleScript's text item delimiters
	set AppleScript's text item delimiters to theDelimiter
	set theText to theItems as text
	set AppleScript's text item delimiters to savedDelimiters
	return theText
end joinList

on escapeField(theValue)
	if theValue is missing value then return ""
	set theText to theValue as text
	set theText to my replaceText(theText, "%", "%25")
	set theText to my replaceText(theText, "|", "%7C")
	set theText to my replaceText(theText, ":", "%3A")
	set theText to my replaceText(theText, ",", "%2C")
	return theText
end escapeField

on encodeRecord(theFields)
	set escapedFields to {}
	repeat with theField in theFields
		set end of escapedFields to my escapeField(contents of theField)
	end repeat
	return my joinList(escapedFields, "|||")
end encodeRecord

on encodeList(theItems)
	set escapedItems to {}
	repeat with theItem in theItems
		set end of escapedItems to my escapeField(contents of theItem)
	end repeat
	return my joinList(escapedItems, ",")
end encodeList

on pad2(n)
	return text -2 thru -1 of ("0" & (n as text))
end pad2

on isoDate(theDate)
	if theDate is missing value then return ""
	set s to time of theDate
	return ((year of theDate) as text) & "-" & my pad2((month of theDate) as integer) & "-" & my pad2(day of theDate) & "T" & my pad2(s div hours) & ":" & my pad2((s mod hours) div minutes) & ":" & my pad2(s mod minutes)
end isoDate

on dateFromISO(isoText)
	set theDate to current date
	set day of theDate to 1
	set year of theDate to (text 1 thru 4 of isoText) as integer
	set month of theDate to (text 6 thru 7 of isoText) as integer
	set day of theDate to (text 9 thru 10 of isoText) as integer
	set time of theDate to ((text 12 thru 13 of isoText) as integer) * hours + ((text 15 thru 16 of isoText) as integer) * minutes + ((text 18 thru 19 of isoText) as integer)
	return theDate
end dateFromISO

on toDate(theText)
	if theText starts with "iso:" then return my dateFromISO(text 5 thru -1 of theText)
	return date theText
end toDate
"""


@dataclass(frozen=True)
class Param:
    """One named script parameter."""

    name: str
    kind: str = "text"
    required: bool = True
    default: Any = None

    def __post_init__(self) -> None:
        if self.kind not in PARAM_KINDS:
            raise ValueError(f"Unknown parameter kind '{self.kind}' for '{self.name}'")

    def reference(self, position: int) -> str:
        """AppleScript expression reading this parameter from argv."""
        ref = f"(my argText(argv, {position}))"
        if self.kind == "integer":
            return f"({ref} as integer)"
        if self.kind == "date":
            return f"(my toDate{ref})"
        return ref

    def coerce(self, value: Any) -> str:
        """Validate a caller value and return the text passed on argv."""
        if self.kind == "integer":
            return str(_coerce_integer(self.name, value))
        if self.kind == "date":
            return _coerce_date(self.name, value)
        text = str(value)
        _check_text(self.name, text)
        if self.required and not text:
            raise ScriptValueError(f"Parameter '{self.name}' must not be empty", self.name)
        return text


@dataclass(frozen=True)
class Operation:
    """
    Immutable descriptor of one scripted operation.
    `body` runs inside `on run argv`; `$param` placeholders become argv
    references and `$opt_<param>` placeholders receive optional_blocks,
    dropped when the parameter is absent.
    """

    name: str
    application: str
    params: tuple[Param, ...]
    body: str
    optional_blocks: Mapping[str, str] = field(default_factory=dict)
    handlers: str = ""

    def param(self, name: str) -> Optional[Param]:
        for p in self.params:
            if p.name == name:
                return p
        return None


@dataclass(frozen=True)
class Script:
    """A rendered script plus the argument vector it expects."""

    operation: str
    application: str
    text: str
    args: tuple[str, ...] = ()

    def argv(self, interpreter: str = "osascript") -> list[str]:
        return [interpreter, "-e", self.text, *(ARG_PREFIX + a for a in self.args)]


# ─── Value Coercion ───────────────────────────────────────────────────────────

def _check_text(name: str, text: str) -> None:
    if "\x00" in text:
        raise ScriptValueError(f"Parameter '{name}' contains a NUL character", name)


def _coerce_integer(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ScriptValueError(f"Parameter '{name}' must be an integer", name)
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ScriptValueError(f"Parameter '{name}' must be an integer, got {value!r}", name)
    if isinstance(value, float) and number != value:
        raise ScriptValueError(f"Parameter '{name}' must be a whole number, got {value!r}", name)
    if number < 0:
        raise ScriptValueError(f"Parameter '{name}' must not be negative", name)
    return number


def iso_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value.replace(microsecond=0).isoformat(timespec="seconds")


def _coerce_date(name: str, value: Any) -> str:
    if isinstance(value, datetime):
        return ISO_DATE_PREFIX + iso_timestamp(value)
    if isinstance(value, date):
        return ISO_DATE_PREFIX + iso_timestamp(datetime.combine(value, time()))
    text = str(value).strip()
    _check_text(name, text)
    if not text:
        raise ScriptValueError(f"Parameter '{name}' must not be empty", name)
    prefixed = text.startswith(ISO_DATE_PREFIX)
    try:
        parsed = datetime.fromisoformat(text[len(ISO_DATE_PREFIX):] if prefixed else text)
    except ValueError:
        # dateFromISO cannot recover from a malformed "iso:" value.
        if prefixed:
            raise ScriptValueError(f"Parameter '{name}' is not a valid ISO date: {text!r}", name) from None
        # Free text such as "Monday, January 1, 2024" is left to AppleScript's date parser.
        return text
    return ISO_DATE_PREFIX + iso_timestamp(parsed)


# ─── Builder ──────────────────────────────────────────────────────────────────

class ScriptBuilder:
    """Turns (operation name, params) into a Script. Pure templating."""

    def __init__(self, operations: Mapping[str, Operation]) -> None:
        self._operations = dict(operations)

    def operation(self, name: str) -> Operation:
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def operation_names(self) -> list[str]:
        return sorted(self._operations)

    def build(self, name: str, params: Optional[Mapping[str, Any]] = None) -> Script:
        op = self.operation(name)
        params = dict(params or {})

        unknown = sorted(set(params) - {p.name for p in op.params})
        if unknown:
            raise ScriptValueError(
                f"Unknown parameter(s) for '{name}': {', '.join(unknown)}", unknown[0]
            )

        args: list[str] = []
        refs: dict[str, str] = {}
        blocks: dict[str, str] = {}
        for p in op.params:
            value = params.get(p.name, p.default)
            if value is None or (value == "" and not p.required):
                if p.required:
                    raise ScriptValueError(f"Missing required parameter '{p.name}'", p.name)
                refs[p.name] = '""'
                blocks[f"opt_{p.name}"] = ""
                continue
            args.append(p.coerce(value))
            refs[p.name] = p.reference(len(args))
            blocks[f"opt_{p.name}"] = op.optional_blocks.get(p.name, "")

        body = Template(op.body).safe_substitute(blocks)
        body = Template(body).substitute(refs)
        text = "\n".join([
            "on run argv",
            _indent(body),
            "end run",
            "",
            PRELUDE_HANDLERS + op.handlers,
        ])
        return Script(operation=op.name, application=op.application, text=text, args=tuple(args))


def _indent(body: str) -> str:
    lines = [ln for ln in body.strip("\n").splitlines() if ln.strip()]
    return "\n".join("\t" + ln for ln in lines)
