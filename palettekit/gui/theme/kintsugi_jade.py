"""Kintsugi Jade palette: jade ivory and verdigris board with brass accents."""

from .schema import OverridePalette

NAME = "Kintsugi Jade"

COLORS = {
    'board_light': '#eaf3ef',
    'board_dark': '#2f6a5f',
    'board_outline': '#1f3e398c',
    'accent': '#d4a656',
    'accent_hover': '#e0b769',
    'accent_outline': '#d4a6565a',
    'select_highlight': '#ffd271aa',
    'premove_highlight': '#5bbef5a0',
    'warning_highlight': '#e05a5ac8',
    'rclick_highlight': '#d4a656aa',
    'hover_outline': '#e8f1ec6e',
    'move_highlight': '#d4a65630',
    'marker': '#d4a65641',
    'text': '#f5f7f6',
    'muted_text': '#bfc8c4',
    'light_text': '#fbfdfc',
    'dark_text': '#131716',
    'eval_white': '#ffffff',
    'eval_black': '#1f2423',
    'panel': '#1f2423e6',
    'header': '#26302d',
    'sidebar_bg': '#171c1b',
    'list_bg': '#1a211f',
    'row_even': '#1d2422',
    'row_odd': '#19201e',
    'hover_bg': '#2f3a36',
    'slot_base': '#242c2a',
    'button': '#2a3431',
    'button_active': '#b4893a',
    'panel_trans': '#1f242396',
    'panel_border_alt': '#c9d3cf32',
    'light_bg': '#2b3331',
    'dark_bg': '#0e1211',
    'bg_top': '#161b1a',
    'bg_bottom': '#0e1211',
    'tooltip_bg': '#121716e6',
    'disc': '#2c353296',
    'disc_hover': '#33403db4',
    'border': '#a6b1ad3c',
    'border_light': '#a6b1ad32',
    'border_bevel': '#a6b1ad28',
    'input_bg': '#1a201f',
    'input_border': '#8fa39e',
    'clock_accent': '#f3f0e9',
    'time_off': '#8a3d3d',
    'score_text_dark': '#0f1312',
    'score_text_light': '#f0f5f3',
    'invalid': '#cc4a4a',
    'logo_bg': '#d4a65646',
    'top_hilight': '#ffffff12',
    'bottom_shadow': '#00000028',
    'panel_alpha220': '#1f2423dc',
    'shadow_light': '#0000003c',
    'shadow_medium': '#0000005a',
    'shadow_strong': '#0000008c',
    'shadow_bar': '#00000046',
    'overlay_dim': '#00000064',
    'overlay': '#00000078',
}

KINTSUGI_JADE_PALETTE = OverridePalette.from_mapping(COLORS)
