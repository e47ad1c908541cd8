from spellbook.sheet.checker import SheetError, check_or_raise, check_sheet
from spellbook.sheet.model import SheetEntry, SpellSheet
from spellbook.sheet.parser import parse_sheet

__all__ = [
    "SheetEntry",
    "SheetError",
    "SpellSheet",
    "check_or_raise",
    "check_sheet",
    "parse_sheet",
]
