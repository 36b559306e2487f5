"""
🎨 applebridge Theme
Rich color tokens, banner and message prefixes.
"""

from rich.style import Style
from rich.theme import Theme

# ─── Color Palette ────────────────────────────────────────────────────────────
PALETTE = {
    "primary":    "#7C3AED",   # violet-600
    "secondary":  "#06B6D4",   # cyan-500
    "accent":     "#F59E0B",   # amber-500
    "success":    "#10B981",   # emerald-500
    "warning":    "#F97316",   # orange-500
    "error":      "#EF4444",   # red-500
    "muted":      "#6B7280",   # gray-500
    "text":       "#E2E8F0",   # slate-200
    "highlight":  "#818CF8",   # indigo-400
    "tool":       "#34D399",   # emerald-400
    "notes":      "#FBBF24",   # amber-400
    "calendar":   "#60A5FA",   # blue-400
    "contacts":   "#F472B6",   # pink-400
}

BRIDGE_THEME = Theme({
    "primary":    Style(color=PALETTE["primary"], bold=True),
    "secondary":  Style(color=PALETTE["secondary"]),
    "accent":     Style(color=PALETTE["accent"], bold=True),
    "success":    Style(color=PALETTE["success"], bold=True),
    "warning":    Style(color=PALETTE["warning"]),
    "error":      Style(color=PALETTE["error"], bold=True),
    "muted":      Style(color=PALETTE["muted"]),
    "text":       Style(color=PALETTE["text"]),
    "highlight":  Style(color=PALETTE["highlight"], bold=True),
    "tool":       Style(color=PALETTE["tool"], bold=True),
    "notes":      Style(color=PALETTE["notes"]),
    "calendar":   Style(color=PALETTE["calendar"]),
    "contacts":   Style(color=PALETTE["contacts"]),
    "dim_text":   Style(color="#4B5563"),
})

BANNER = "[primary]🍎 applebridge[/primary] [muted]· Notes · Calendar · Contacts over osascript[/muted]"

# ─── Tool Category Styles ─────────────────────────────────────────────────────
CATEGORY_STYLES = {
    "NOTES":    "notes",
    "CALENDAR": "calendar",
    "CONTACTS": "contacts",
}

# ─── Error Prefixes ───────────────────────────────────────────────────────────
GATEWAY_ERROR_PREFIX = "Error: invalid arguments -"
TOOL_ERROR_PREFIX    = "Error:"
