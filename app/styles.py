"""
Tailwind class tokens shared by all pages.

Pages import the C_* names; keep long class strings here instead of inline.
"""

from __future__ import annotations

C_BG = "bg-slate-50 text-slate-900 min-h-screen"
C_CONTAINER = "w-full max-w-5xl mx-auto px-6 py-6 gap-6"

C_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"
C_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
C_SECTION_TITLE = "text-sm font-semibold text-slate-900"
C_TEXT_MUTED = "text-sm text-slate-500"
C_ERROR_TEXT = "text-sm text-rose-600"

C_BTN_PRIM = (
    "bg-slate-900 text-white hover:bg-slate-800 rounded-lg px-4 py-2 text-sm font-semibold transition-all"
)
C_BTN_SEC = (
    "bg-white text-slate-900 border border-slate-200 hover:bg-slate-50 rounded-lg px-4 py-2 "
    "text-sm font-semibold transition-all"
)
C_BTN_ICON = "text-slate-500 hover:text-slate-900"

C_INPUT = "w-full text-sm"

C_NAV_ITEM = "text-slate-600 hover:text-slate-900 hover:bg-slate-100 rounded-md"
C_NAV_ITEM_ACTIVE = "bg-slate-100 text-slate-900 font-semibold rounded-md"

C_TABLE_HEADER = "w-full px-3 py-2 text-xs font-semibold uppercase tracking-wider text-slate-600 border-b border-slate-200"
C_TABLE_ROW = "w-full px-3 py-2 text-sm text-slate-800 border-b border-slate-200/70 items-center"

C_BADGE_GREEN = "bg-emerald-50 text-emerald-700 border border-emerald-200 px-2 py-0.5 rounded-full text-xs font-medium"
C_BADGE_GRAY = "bg-slate-100 text-slate-700 border border-slate-200 px-2 py-0.5 rounded-full text-xs font-medium"

C_BREADCRUMB = "text-xl text-slate-500 no-underline"
C_BREADCRUMB_ACTIVE = "text-xl text-slate-900 font-semibold no-underline"
