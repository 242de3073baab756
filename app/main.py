from dataclasses import replace

import streamlit as st

from config import (
    PROFILE_STRATEGY,
    Config,
    get_config_from_widgets,
    load_blueprint,
    set_default_config,
)
from eternals.blueprint import BlueprintError
from eternals.renderer.compositor import PROFILE_REGISTRY, RenderProfile, render_image
from eternals.renderer.polys import STRATEGY_REGISTRY

st.set_page_config(layout="wide", page_title="Eternals")


def make_profile(config: Config) -> RenderProfile:
    profile = PROFILE_REGISTRY[config.profile_name]
    if config.eyes_strategy != PROFILE_STRATEGY:
        profile = replace(profile, eyes_strategy=STRATEGY_REGISTRY[config.eyes_strategy])
    if config.mouth_strategy != PROFILE_STRATEGY:
        profile = replace(
            profile, mouth_strategy=STRATEGY_REGISTRY[config.mouth_strategy]
        )
    return profile


def reload(config: Config) -> None:
    try:
        blueprint, status = load_blueprint(config)
    except BlueprintError as e:
        st.session_state["blueprint"] = None
        st.session_state["status"] = None
        st.error(f"Invalid blueprint: {e}")
        return
    st.session_state["blueprint"] = blueprint
    st.session_state["status"] = status


# --------- Main App ---------

set_default_config()

with st.sidebar:
    config: Config = get_config_from_widgets()
    if st.button("🔁 Load", key="load_btn", use_container_width=True):
        st.session_state["config"] = config
        reload(config)

if "blueprint" not in st.session_state:
    reload(st.session_state["config"])

tab_view, tab_blueprint = st.tabs(["Eternal", "Blueprint"])

with tab_view:
    status = st.session_state.get("status")
    if status is not None and status != 200:
        st.warning(f"No blueprint available (status {status})", icon="⚠️")
    img = render_image(
        st.session_state["blueprint"], profile=make_profile(st.session_state["config"])
    )
    st.image(img, use_container_width=True)

with tab_blueprint:
    blueprint = st.session_state["blueprint"]
    if blueprint is not None:
        st.json(blueprint.to_dict(), expanded=1)
