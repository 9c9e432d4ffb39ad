import logging

import streamlit as st

from schemagenie.genie_streamlit.client import SchemaGenieClient, build_payload, can_submit
from schemagenie.genie_streamlit.configuration.client import get_client_configuration
from schemagenie.shared.erd import decode_erd_payload, render_mermaid_html
from schemagenie.shared.options import (
    DATABASE_TYPE_LABELS,
    INPUT_TYPE_LABELS,
    OUTPUT_FORMAT_LABELS,
    DatabaseType,
    InputType,
    OutputFormat,
)

logger = logging.getLogger(__name__)

SCHEMA_LANGUAGES = {
    OutputFormat.PRISMA.value: "prisma",
    OutputFormat.SQL.value: "sql",
    OutputFormat.MONGODB.value: "json",
    OutputFormat.FIREBASE.value: "json",
}

SCHEMA_FILE_NAMES = {
    OutputFormat.PRISMA.value: "schema.prisma",
    OutputFormat.SQL.value: "schema.sql",
    OutputFormat.MONGODB.value: "schema.json",
    OutputFormat.FIREBASE.value: "database.rules.json",
}

INPUT_PLACEHOLDERS = {
    InputType.REACT.value: "Paste your React component code here...",
    InputType.HTML.value: "Paste your HTML markup here...",
    InputType.JSON.value: "Paste your JSON form fields or data structure here...",
}


def load_uploaded_file():
    """Copy the uploaded file's text into the input buffer."""
    uploaded = st.session_state.get("uploaded_file")
    if uploaded is None:
        return
    try:
        st.session_state.input_code = uploaded.getvalue().decode("utf-8")
        st.session_state._input_code_widget = st.session_state.input_code
    except UnicodeDecodeError:
        logger.error(f"Could not read uploaded file {uploaded.name} as UTF-8 text")
        st.session_state.upload_error = f"{uploaded.name} is not a UTF-8 text file"


def store_input_code():
    """Keep the code buffer outside the widget so it survives input type switches."""
    st.session_state.input_code = st.session_state._input_code_widget


def store_figma_url():
    st.session_state.figma_url = st.session_state._figma_url_widget


def start_generation():
    st.session_state.is_generating = True


st.title("SchemaGenie")
st.subheader("Turn your frontend into a smart backend instantly")

# Initialize session state
for key, default in (
    ("input_code", ""),
    ("figma_url", ""),
    ("is_generating", False),
    ("result", None),
    ("result_format", OutputFormat.PRISMA.value),
    ("upload_error", None),
    ("generation_error", None),
):
    if key not in st.session_state:
        st.session_state[key] = default

col_input, col_output = st.columns(2)

with col_input:
    st.markdown("#### Input your frontend code or design")
    input_type = st.radio(
        "Input type:",
        [kind.value for kind in InputType],
        format_func=lambda value: INPUT_TYPE_LABELS[InputType(value)],
        horizontal=True,
    )

    if input_type == InputType.FIGMA.value:
        st.session_state._figma_url_widget = st.session_state.figma_url
        st.text_input(
            "Figma file URL:",
            key="_figma_url_widget",
            on_change=store_figma_url,
            placeholder="https://www.figma.com/file/...",
        )
        st.caption("Make sure your Figma file is publicly accessible or shared with view permissions.")
    else:
        st.session_state._input_code_widget = st.session_state.input_code
        st.text_area(
            "Code:",
            key="_input_code_widget",
            on_change=store_input_code,
            height=300,
            placeholder=INPUT_PLACEHOLDERS[input_type],
        )
        st.file_uploader(
            "Or upload a file:",
            type=["js", "jsx", "ts", "tsx", "html", "htm", "json"],
            key="uploaded_file",
            on_change=load_uploaded_file,
        )
        if st.session_state.upload_error:
            st.warning(st.session_state.upload_error)
            st.session_state.upload_error = None

    st.markdown("#### Generation settings")
    col1, col2 = st.columns(2)
    with col1:
        output_format = st.selectbox(
            "Output format:",
            [fmt.value for fmt in OutputFormat],
            format_func=lambda value: OUTPUT_FORMAT_LABELS[OutputFormat(value)],
        )
    with col2:
        database_type = st.selectbox(
            "Database type:",
            [db.value for db in DatabaseType],
            format_func=lambda value: DATABASE_TYPE_LABELS[DatabaseType(value)],
        )
    suggest_api = st.toggle("Suggest API routes", value=True)
    generate_erd = st.toggle("Generate ER diagram", value=True)
    show_explanation = st.toggle("Explain schema decisions", value=False)

    st.button(
        "Generating schema..." if st.session_state.is_generating else "Generate Schema",
        type="primary",
        disabled=not can_submit(
            input_type,
            st.session_state.input_code,
            st.session_state.figma_url,
            st.session_state.is_generating,
        ),
        on_click=start_generation,
        width="stretch",
    )

if st.session_state.is_generating:
    payload = build_payload(
        input_type,
        st.session_state.input_code,
        st.session_state.figma_url,
        output_format,
        database_type,
        suggest_api,
        generate_erd,
    )
    client = SchemaGenieClient(get_client_configuration())
    try:
        with col_output, st.spinner("Analyzing your frontend and generating schema..."):
            st.session_state.result = client.generate_schema(payload)
            st.session_state.result_format = output_format
    finally:
        st.session_state.is_generating = False
    if st.session_state.result is None:
        st.session_state.generation_error = "Failed to generate schema. Check that the API is running and try again."
    st.rerun()

with col_output:
    result = st.session_state.result
    if st.session_state.generation_error:
        st.error(st.session_state.generation_error)
        st.session_state.generation_error = None
    if not result:
        st.info("Generated schema, API routes and ER diagram will appear here.")
    else:
        tab_names = ["Schema"]
        if result.get("apiRoutes"):
            tab_names.append("API Routes")
        if result.get("erdImageUrl"):
            tab_names.append("ER Diagram")
        tabs = dict(zip(tab_names, st.tabs(tab_names)))

        with tabs["Schema"]:
            result_format = st.session_state.result_format
            st.code(result["schema"], language=SCHEMA_LANGUAGES.get(result_format))
            st.download_button(
                "Download schema",
                data=result["schema"],
                file_name=SCHEMA_FILE_NAMES.get(result_format, "schema.txt"),
                mime="text/plain",
            )

        if "API Routes" in tabs:
            with tabs["API Routes"]:
                st.code(result["apiRoutes"], language="text")

        if "ER Diagram" in tabs:
            with tabs["ER Diagram"]:
                try:
                    diagram = decode_erd_payload(result["erdImageUrl"])
                except ValueError as e:
                    st.error(f"Could not decode ER diagram: {str(e)}")
                else:
                    st.iframe(render_mermaid_html(diagram), height=600, alt="ER diagram")
                    with st.expander("Mermaid source"):
                        st.code(diagram, language="text")

        if show_explanation and result.get("explanation"):
            st.markdown("#### Schema design explanation")
            st.markdown(result["explanation"])
