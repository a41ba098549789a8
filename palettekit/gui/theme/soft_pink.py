"""Soft Pink palette: blush ivory and dusty rose board, rosy accent."""

from .schema import OverridePalette

NAME = "Soft Pink"

COLORS = {
    'board_light': '#f4e9ef',
    'board_dark': '#c08aa0',
    'board_outline': '#8e5e738c',
    'accent': '#d47fa1',
    'accent_hover': '#df94b2',
    'accent_outline': '#d47fa15a',
    'select_highlight': '#f8ea9aaa',
    'premove_highlight': '#8aa7ffa0',
    'warning_highlight': '#e2574cc8',
    'rclick_highlight': '#d47fa1aa',
    'hover_outline': '#f6eef26e',
    'move_highlight': '#d47fa130',
    'marker': '#d47fa141',
    'text': '#f1eff1',
    'muted_text': '#cfc8cf',
    'light_text': '#faf7fa',
    'dark_text': '#171316',
    'eval_white': '#ffffff',
    'eval_black': '#3e383c',
    'panel': '#2e2a2ce6',
    'header': '#2a2629',
    'sidebar_bg': '#221f23',
    'list_bg': '#2a2629',
    'row_even': '#2a2629',
    'row_odd': '#221f23',
    'hover_bg': '#3b353a',
    'slot_base': '#342f33',
    'button': '#383338',
    'button_active': '#b06c89',
    'panel_trans': '#2e2a2c96',
    'panel_border_alt': '#e8dde332',
    'light_bg': '#3d383d',
    'dark_bg': '#1a171a',
    'bg_top': '#2e2a2c',
    'bg_bottom': '#262327',
    'tooltip_bg': '#211e21e6',
    'disc': '#3a343996',
    'disc_hover': '#433d42b4',
    'border': '#c8b5be3c',
    'border_light': '#c8b5be32',
    'border_bevel': '#c8b5be28',
    'input_bg': '#272428',
    'input_border': '#bfa6b2',
    'clock_accent': '#f5f1f4',
    'time_off': '#6b3b4e',
    'score_text_dark': '#141114',
    'score_text_light': '#efe7ec',
    'invalid': '#d04d7e',
    'logo_bg': '#d47fa146',
    'top_hilight': '#ffffff12',
    'bottom_shadow': '#00000028',
    'panel_alpha220': '#2e2a2cdc',
    'shadow_light': '#0000003c',
    'shadow_medium': '#0000005a',
    'shadow_strong': '#0000008c',
    'shadow_bar': '#00000046',
    'overlay_dim': '#00000064',
    'overlay': '#00000078',
}

SOFT_PINK_PALETTE = OverridePalette.from_mapping(COLORS)
