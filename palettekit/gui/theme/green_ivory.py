"""Green Ivory palette: green and beige board with dark neutral chrome."""

from .schema import OverridePalette

NAME = "Green Ivory"

COLORS = {
    'board_light': '#ebecd0',
    'board_dark': '#739552',
    'board_outline': '#4f6d348c',
    'accent': '#8dae6c',
    'accent_hover': '#9bb87b',
    'accent_outline': '#8dae6c5a',
    'select_highlight': '#f7f769aa',
    'premove_highlight': '#4b90ffa0',
    'warning_highlight': '#e2574cc8',
    'rclick_highlight': '#8dae6caa',
    'hover_outline': '#dededd6e',
    'move_highlight': '#8dae6c30',
    'marker': '#8dae6c41',
    'text': '#dededd',
    'muted_text': '#b9b8b6',
    'light_text': '#f5f5f4',
    'dark_text': '#12110f',
    'eval_white': '#ffffff',
    'eval_black': '#403d39',
    'panel': '#302e2be6',
    'header': '#262522',
    'sidebar_bg': '#21201e',
    'list_bg': '#262522',
    'row_even': '#262522',
    'row_odd': '#21201e',
    'hover_bg': '#3a3834',
    'slot_base': '#2a2926',
    'button': '#3a3a36',
    'button_active': '#5c7e4a',
    'panel_trans': '#302e2b96',
    'panel_border_alt': '#dededd32',
    'light_bg': '#3a3834',
    'dark_bg': '#1a1917',
    'bg_top': '#302e2b',
    'bg_bottom': '#262522',
    'tooltip_bg': '#1e1d1be6',
    'disc': '#3a3a3696',
    'disc_hover': '#444440b4',
    'border': '#9fa8993c',
    'border_light': '#9fa89932',
    'border_bevel': '#9fa89928',
    'input_bg': '#242321',
    'input_border': '#a4a49f',
    'clock_accent': '#f4f4f2',
    'time_off': '#3e5d37',
    'score_text_dark': '#141412',
    'score_text_light': '#ededeb',
    'invalid': '#c84646',
    'logo_bg': '#8dae6c46',
    'top_hilight': '#ffffff12',
    'bottom_shadow': '#00000028',
    'panel_alpha220': '#302e2bdc',
    'shadow_light': '#0000003c',
    'shadow_medium': '#0000005a',
    'shadow_strong': '#0000008c',
    'shadow_bar': '#00000046',
    'overlay_dim': '#00000064',
    'overlay': '#00000078',
}

GREEN_IVORY_PALETTE = OverridePalette.from_mapping(COLORS)
