from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional, Tuple

import streamlit as st

from eternals.blueprint import Blueprint
from eternals.examples.blueprints import generate
from eternals.fetch import STATUS_OK, fetch_blueprint
from eternals.renderer.compositor import PROFILE_REGISTRY
from eternals.renderer.polys import STRATEGY_REGISTRY

SOURCE_GENERATED = "Generated"
SOURCE_FETCHED = "Fetched"

# Strategy choice that keeps whatever the selected profile uses
PROFILE_STRATEGY = "profile"


@dataclass(frozen=True)
class Config:
    source: str
    seed: int
    eternal_id: str
    profile_name: str
    eyes_strategy: str
    mouth_strategy: str


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = Config(
            source=SOURCE_GENERATED,
            seed=0,
            eternal_id="1",
            profile_name="standard",
            eyes_strategy=PROFILE_STRATEGY,
            mouth_strategy=PROFILE_STRATEGY,
        )


def source_section(current: Config) -> Tuple[str, int, str]:
    st.subheader("Blueprint source")
    sources = [SOURCE_GENERATED, SOURCE_FETCHED]
    source = st.radio(
        "Source",
        sources,
        index=sources.index(current.source),
        horizontal=True,
        key="source_radio",
    )
    seed = st.number_input(
        "Random seed", min_value=0, value=current.seed, key="seed_input"
    )
    eternal_id = st.text_input(
        "Eternal id", value=current.eternal_id, key="eternal_id_input"
    )
    return source, int(seed), eternal_id.strip()


def style_section(current: Config) -> Tuple[str, str, str]:
    st.subheader("Style")
    profiles = list(PROFILE_REGISTRY.keys())
    profile_name = st.selectbox(
        "Profile",
        profiles,
        index=profiles.index(current.profile_name),
        key="profile_select",
    )
    strategies = [PROFILE_STRATEGY, *STRATEGY_REGISTRY.keys()]
    eyes = st.selectbox(
        "Eyes",
        strategies,
        index=strategies.index(current.eyes_strategy),
        help="Overrides the profile's eye renderer unless 'profile'.",
        key="eyes_strategy_select",
    )
    mouth = st.selectbox(
        "Mouth",
        strategies,
        index=strategies.index(current.mouth_strategy),
        help="Overrides the profile's mouth renderer unless 'profile'.",
        key="mouth_strategy_select",
    )
    return profile_name, eyes, mouth


def get_config_from_widgets() -> Config:
    current: Config = st.session_state["config"]
    source, seed, eternal_id = source_section(current)
    profile_name, eyes, mouth = style_section(current)
    return Config(
        source=source,
        seed=seed,
        eternal_id=eternal_id,
        profile_name=profile_name,
        eyes_strategy=eyes,
        mouth_strategy=mouth,
    )


def load_blueprint(config: Config) -> Tuple[Optional[Blueprint], int]:
    """Generate or fetch the blueprint; returns it with a fetch-style status."""
    if config.source == SOURCE_GENERATED:
        return generate(seed=config.seed), STATUS_OK
    result = asyncio.run(fetch_blueprint(config.eternal_id))
    return result.blueprint, result.status
