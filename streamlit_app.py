"""Streamlit frontend for the Unit Converter.

Single-screen form: source and destination pickers, a value field,
a Convert button and the result.
"""

import streamlit as st

from unit_converter.config import DISPLAY_DECIMALS, UNIT_NAMES
from unit_converter.form import submit
from pages.components.unit_reference import render_unit_reference

st.set_page_config(
    page_title="Unit Converter",
    page_icon="📏",
    layout="centered",
)

if 'last_result' not in st.session_state:
    st.session_state.last_result = None

st.title("📏 Unit Converter")

with st.form("convert_form"):
    col1, col2 = st.columns(2)
    with col1:
        source = st.selectbox("From", UNIT_NAMES, index=0)
    with col2:
        destination = st.selectbox("To", UNIT_NAMES, index=1)

    value_text = st.text_input("Value", placeholder="e.g. 12.5")
    submitted = st.form_submit_button("Convert")

if submitted:
    result = submit(value_text, source, destination, DISPLAY_DECIMALS)
    if result.ok:
        st.session_state.last_result = result
    else:
        st.toast(f"⚠️ {result.notification}")

if st.session_state.last_result is not None:
    result = st.session_state.last_result
    st.metric(
        f"{result.request.value:g} {result.request.source_unit.value}",
        f"{result.text} {result.request.destination_unit.value}",
    )

with st.expander("Available units"):
    render_unit_reference()
