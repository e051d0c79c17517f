"""
Streamlit page for the Triad card gallery.

Left sidebar: star-rating buttons, name search, reset.
Centre: the filtered card grid (4 columns); click a card's button to select it.
Right: details of the active card.

Card data comes from the build snapshot (data/cards.json), built on first load
if it is missing. Filter and selection state lives in st.session_state as a
single GalleryState.
"""

import html
import json

import streamlit as st

from etl import pipeline
from gallery.filters import STAR_RATINGS
from gallery.models import Card
from gallery.state import GalleryState

GRID_COLUMNS = 4
IMAGE_WIDTH, IMAGE_HEIGHT = 104, 128
INACTIVE_OPACITY = 0.6

FONT_CSS = """
<style>
html, body, [class*="css"] { font-family: "Inter", sans-serif; }
</style>
"""


@st.cache_data
def _load_cards() -> list[Card]:
    return pipeline.ensure(pipeline.CARDS_FILE)


def _get_state() -> GalleryState:
    if "gallery" not in st.session_state:
        st.session_state.gallery = GalleryState(_load_cards())
        st.session_state.search_input = ""
        st.session_state.auto_select = False
    return st.session_state.gallery


# ---------------------------------------------------------------------------
# Callbacks (run before the next rerun renders widgets)
# ---------------------------------------------------------------------------

def _on_search(state: GalleryState) -> None:
    state.set_search_text(st.session_state.search_input)


def _on_reset(state: GalleryState) -> None:
    state.reset()
    st.session_state.search_input = ""


def _on_auto_select(state: GalleryState) -> None:
    state.auto_select = st.session_state.auto_select


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _render_filters(state: GalleryState) -> None:
    sb = st.sidebar
    sb.header("Filters")

    sb.caption("Filter by star rating -")
    for col, star in zip(sb.columns(len(STAR_RATINGS)), STAR_RATINGS):
        col.button(
            str(star),
            key=f"star-{star}",
            type="primary" if state.star_rating == star else "secondary",
            on_click=state.set_star_rating,
            args=(star,),
        )

    sb.caption("Search by name -")
    sb.text_input(
        "Search by name",
        key="search_input",
        label_visibility="collapsed",
        on_change=_on_search,
        args=(state,),
    )

    sb.button("Reset", on_click=_on_reset, args=(state,))
    sb.toggle(
        "Auto-select single match",
        key="auto_select",
        on_change=_on_auto_select,
        args=(state,),
    )


def _card_image_html(card: Card, active: bool) -> str:
    opacity = 1.0 if active else INACTIVE_OPACITY
    return (
        f'<img src="{html.escape(card.image)}" alt="{html.escape(card.name)}" width="{IMAGE_WIDTH}" '
        f'height="{IMAGE_HEIGHT}" style="opacity:{opacity}">'
    )


def _render_grid(state: GalleryState) -> None:
    cards = state.visible
    if not cards:
        st.info("No cards match these filters.")
        return

    cols = st.columns(GRID_COLUMNS)
    for i, card in enumerate(cards):
        active = state.is_active(card)
        with cols[i % GRID_COLUMNS]:
            st.markdown(_card_image_html(card, active), unsafe_allow_html=True)
            st.button(
                card.name,
                key=f"card-{card.id}",
                type="primary" if active else "secondary",
                on_click=state.select,
                args=(card,),
            )


def _render_detail(card: Card | None) -> None:
    if card is None:
        return
    st.subheader(card.name)
    st.image(card.icon, width=48)
    st.write(card.description)
    st.code(json.dumps(card.model_dump(), indent=2), language="json")


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

def render() -> None:
    st.set_page_config(page_title="Triad Cards", layout="wide")
    st.markdown(FONT_CSS, unsafe_allow_html=True)

    state = _get_state()
    _render_filters(state)

    grid_col, detail_col = st.columns([2, 1])
    with grid_col:
        _render_grid(state)
    with detail_col:
        _render_detail(state.active_card)
