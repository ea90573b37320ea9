import csv
import html
import io
import logging
import random

import streamlit as st

from src.config import Settings, load_settings
from src.matching.facets import sorted_languages
from src.models.profile import Profile
from src.sources.profiles import load_profiles
from src.state.controller import FilterController

try:
    settings = load_settings()
    config_error = ""
except ValueError as e:
    settings = Settings()
    config_error = str(e)
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("profile_directory")
if config_error:
    logger.error("Invalid config, using defaults: %s", config_error)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=settings.page_title,
    layout="wide",
    initial_sidebar_state="expanded",
)

# ---------------------------------------------------------------------------
# CSS
# ---------------------------------------------------------------------------
st.markdown("""
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}

:root {
    --ink: #1B2A4A;
    --slate: #5A6275;
    --chip: rgba(255, 255, 255, 0.65);
}

.profile-card {
    border-radius: 14px; padding: 1.1rem 1.2rem;
    margin-bottom: 0.4rem; min-height: 190px;
    transition: transform 0.2s;
}
.profile-card:hover { transform: translateY(-4px); }
.profile-card h3 { margin: 0 0 0.6rem 0; font-size: 1.25rem; color: var(--ink); }
.profile-card .employer { color: var(--slate); font-size: 1rem; }
.profile-card .meta { color: var(--slate); font-size: 0.85rem; }
.skill-chip {
    display: inline-block; background: var(--chip); color: var(--ink);
    padding: 1px 10px; border-radius: 12px; font-size: 0.8rem;
    margin: 6px 4px 0 0; backdrop-filter: blur(4px); white-space: nowrap;
}
.detail-label { color: var(--slate); font-weight: 700; }
</style>
""", unsafe_allow_html=True)

# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
if "profiles" not in st.session_state:
    try:
        st.session_state.profiles = load_profiles(settings.profiles_path)
        st.session_state.load_error = ""
    except ValueError as e:
        logger.error("Failed to load profiles: %s", e)
        st.session_state.profiles = []
        st.session_state.load_error = str(e)

_DEFAULTS = {
    "controller": FilterController(),
    "card_gradients": {},
}
for k, v in _DEFAULTS.items():
    if k not in st.session_state:
        st.session_state[k] = v

profiles: list[Profile] = st.session_state.profiles
controller: FilterController = st.session_state.controller


def _sync_widgets():
    """Push controller state into the widget keys so programmatic changes show up."""
    st.session_state.search_input = controller.search_term
    st.session_state.experience_input = tuple(controller.filters.experience)
    st.session_state.pay_input = tuple(controller.filters.pay)
    st.session_state.hours_input = tuple(controller.filters.min_hours_week)
    st.session_state.languages_input = sorted(controller.filters.languages)


def _on_search_change():
    controller.set_search_term(st.session_state.search_input)


def _on_experience_change():
    controller.set_experience(st.session_state.experience_input)


def _on_pay_change():
    controller.set_pay(st.session_state.pay_input)


def _on_hours_change():
    controller.set_min_hours_week(st.session_state.hours_input)


def _on_languages_change():
    controller.set_languages(st.session_state.languages_input)
    # Clearing every language also clears the search box.
    st.session_state.search_input = controller.search_term


def _on_reset():
    controller.reset_to_defaults()
    _sync_widgets()


if "search_input" not in st.session_state:
    _sync_widgets()


def _gradient_for(profile_id: str) -> str:
    gradients = st.session_state.card_gradients
    if profile_id not in gradients:
        hue1, hue2 = random.randrange(360), random.randrange(360)
        gradients[profile_id] = (
            f"linear-gradient(135deg, hsl({hue1}, 30%, 95%), hsl({hue2}, 30%, 95%))"
        )
    return gradients[profile_id]


def _skill_chips(skills: tuple[str, ...], limit: int | None = None) -> str:
    shown = skills if limit is None else skills[:limit]
    chips = [f'<span class="skill-chip">{html.escape(s)}</span>' for s in shown]
    hidden = len(skills) - len(shown)
    if hidden > 0:
        rest = html.escape(", ".join(skills[len(shown):]))
        chips.append(f'<span class="skill-chip" title="{rest}">+{hidden}</span>')
    return " ".join(chips)


@st.dialog("Profile")
def _show_profile(profile: Profile):
    st.markdown(f"## {profile.name}")
    if profile.employer:
        st.markdown(f"#### {profile.employer}")
    st.markdown(
        f'<span class="detail-label">College:</span> {html.escape(profile.college)}<br>'
        f'<span class="detail-label">Location:</span> {html.escape(profile.location)}',
        unsafe_allow_html=True,
    )
    if profile.bio:
        st.write(profile.bio)
    c1, c2, c3 = st.columns(3)
    c1.metric("Experience", f"{profile.experience:g} yrs")
    c2.metric("Pay", f"${profile.pay:g}/hr")
    c3.metric("Min hours", f"{profile.min_hours_week:g}/wk")
    st.caption("Skills")
    st.markdown(_skill_chips(profile.skills), unsafe_allow_html=True)
    if profile.languages:
        st.caption("Languages: " + ", ".join(sorted(profile.languages)))


# ---------------------------------------------------------------------------
# Header + search
# ---------------------------------------------------------------------------
st.title(settings.page_title)

if config_error:
    st.error(f"Invalid config, using defaults: {config_error}")
if st.session_state.load_error:
    st.error(f"Could not load profiles: {st.session_state.load_error}")

st.text_input(
    "Search profiles",
    key="search_input",
    on_change=_on_search_change,
    placeholder="Search by name or skill",
)

# ---------------------------------------------------------------------------
# Sidebar: filters
# ---------------------------------------------------------------------------
with st.sidebar:
    active = controller.filters.active_count
    st.markdown(f"### Filters ({active})" if active else "### Filters")
    st.slider(
        "Experience (years)", min_value=0, max_value=settings.experience_max,
        key="experience_input", on_change=_on_experience_change,
    )
    st.slider(
        "Pay ($/hour)", min_value=0, max_value=settings.pay_max,
        key="pay_input", on_change=_on_pay_change,
    )
    st.slider(
        "Minimum hours per week", min_value=0, max_value=settings.hours_max,
        key="hours_input", on_change=_on_hours_change,
    )
    st.multiselect(
        "Languages",
        sorted_languages(profiles),
        key="languages_input",
        on_change=_on_languages_change,
        placeholder="Select languages",
        help="Profiles must speak every selected language.",
    )
    st.button("Reset filters", on_click=_on_reset, use_container_width=True)

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
results = controller.apply(profiles)

info_col, export_col = st.columns([5, 1])
with info_col:
    st.caption(f"Showing {len(results)} of {len(profiles)}")
with export_col:
    csv_buffer = io.StringIO()
    writer = csv.writer(csv_buffer)
    writer.writerow(["Name", "Employer", "College", "Location", "Experience",
                     "Pay", "Min Hours/Week", "Skills", "Languages"])
    for p in results:
        writer.writerow([
            p.name, p.employer, p.college, p.location, p.experience,
            p.pay, p.min_hours_week, "; ".join(p.skills), "; ".join(sorted(p.languages)),
        ])
    st.download_button("CSV", csv_buffer.getvalue(), "profiles.csv", "text/csv",
                       use_container_width=True)

if not results:
    st.info("No profiles match. Try a different search or reset the filters.")

per_row = max(1, settings.cards_per_row)
for start in range(0, len(results), per_row):
    cols = st.columns(per_row)
    for col, profile in zip(cols, results[start:start + per_row]):
        with col:
            st.markdown(f"""
            <div class="profile-card" style="background: {_gradient_for(profile.id)};">
                <h3>{html.escape(profile.name)}</h3>
                <div class="employer">{html.escape(profile.employer)}</div>
                <div class="meta">{html.escape(profile.college)}</div>
                <div class="meta">{html.escape(profile.location)}</div>
                <div>{_skill_chips(profile.skills, settings.max_card_skills)}</div>
            </div>
            """, unsafe_allow_html=True)
            if st.button("View profile", key=f"view_{profile.id}", use_container_width=True):
                _show_profile(profile)
