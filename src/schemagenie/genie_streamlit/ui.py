import logging

import streamlit as st
from dotenv import load_dotenv

load_dotenv()
logging.basicConfig(level=logging.INFO)

st.set_page_config(
    page_title="SchemaGenie",
    page_icon="🧞",
    layout="wide",
)

pg = st.navigation(
    {
        "SchemaGenie": [
            st.Page("pages/1_schema_generator.py", title="Schema Generator"),
        ]
    },
    expanded=True,
)

pg.run()
