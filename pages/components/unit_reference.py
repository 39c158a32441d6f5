"""Unit reference table component for the Streamlit app."""

import streamlit as st

from unit_converter.catalog import catalog_frame


def render_unit_reference():
    """Render the unit catalog with base-unit factors."""
    df = catalog_frame()
    df = df.rename(columns={
        "unit": "Unit",
        "category": "Category",
        "base_unit": "Base unit",
        "factor": "Base units per 1",
    })
    st.dataframe(df, hide_index=True)
    st.caption("Temperature converts through Celsius: °F = °C × 1.8 + 32, K = °C + 273.15")
