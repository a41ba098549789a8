"""Amethyst palette: lavender and indigo-slate board, amethyst accent, deep charcoal chrome."""

from .schema import OverridePalette

NAME = "Amethyst"

COLORS = {
    'board_light': '#f5f0fc',
    'board_dark': '#464f82',
    'board_outline': '#5e489e78',
    'accent': '#a275ff',
    'accent_hover': '#bb99ff',
    'accent_outline': '#a275ff5a',
    'select_highlight': '#ffd36eaa',
    'premove_highlight': '#60c4ffa0',
    'warning_highlight': '#ff7a88be',
    'rclick_highlight': '#a275ffaa',
    'hover_outline': '#eee9ff6e',
    'move_highlight': '#a275ff30',
    'marker': '#a275ff41',
    'text': '#f2f0fc',
    'muted_text': '#c2c0d4',
    'light_text': '#faf8ff',
    'dark_text': '#17131e',
    'eval_white': '#ffffff',
    'eval_black': '#312a3d',
    'panel': '#1a1722e6',
    'header': '#282236',
    'sidebar_bg': '#14121c',
    'list_bg': '#181621',
    'row_even': '#1f1c29',
    'row_odd': '#1b1824',
    'hover_bg': '#37324a',
    'slot_base': '#2c2738',
    'button': '#362e4a',
    'button_active': '#7f6ad2',
    'panel_trans': '#1a172296',
    'panel_border_alt': '#c8c2e032',
    'panel_alpha220': '#1a1722dc',
    'light_bg': '#e0daf0',
    'dark_bg': '#121018',
    'bg_top': '#1c1823',
    'bg_bottom': '#100d16',
    'tooltip_bg': '#16131ee6',
    'disc': '#3a314a96',
    'disc_hover': '#43385ab4',
    'border': '#9ca2cc3c',
    'border_light': '#9ca2cc32',
    'border_bevel': '#9ca2cc28',
    'input_bg': '#2a2338',
    'input_border': '#bab2dc',
    'clock_accent': '#f5f2ff',
    'time_off': '#7050a8',
    'score_text_dark': '#14121c',
    'score_text_light': '#ece8fa',
    'low_time': '#dc4646',
    'valid': '#7acda4',
    'invalid': '#d96a86',
    'logo_bg': '#a275ff46',
    'gold': '#d4af37',
    'white_dim': '#ffffff46',
    'white_faint': '#ffffff1e',
    'top_hilight': '#ffffff12',
    'bottom_shadow': '#00000028',
    'shadow_light': '#0000003c',
    'shadow_medium': '#0000005a',
    'shadow_strong': '#0000008c',
    'shadow_bar': '#00000046',
    'overlay_dim': '#00000064',
    'overlay': '#00000078',
}

AMETHYST_PALETTE = OverridePalette.from_mapping(COLORS)
