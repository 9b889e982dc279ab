# app.py
# Position Sizing Calculators
# Total Risk % • Dollar Risk • Position % (+ FAQ)
#
# Run:
#   pip install -e .
#   streamlit run app.py

import logging

import streamlit as st

from app_pages.dollar_risk_calculator import dollar_risk_main
from app_pages.guide import guide_main
from app_pages.position_percent_calculator import position_percent_main
from app_pages.total_risk_calculator import total_risk_main
from config.settings import LOG_LEVEL

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.WARNING),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(page_title="Position Sizing Calculators", layout="wide")

PAGES = {
    "Total Risk %": total_risk_main,
    "Dollar Risk": dollar_risk_main,
    "Position %": position_percent_main,
    "FAQ": guide_main,
}

with st.sidebar:
    st.header("Calculators")
    page = st.radio("Go to", list(PAGES), index=0, label_visibility="collapsed")
    st.divider()
    st.caption("Sizing is fractional; round down to what your broker allows.")

PAGES[page]()
