import os

import requests
import streamlit as st
import streamlit.components.v1 as components

API_BASE = os.getenv("RTF_PREVIEW_API_BASE", os.getenv("API_BASE", "http://localhost:8080")).rstrip("/")
EXAMPLE_URL = "https://scroogexhtml.com/rtf/features-fonts.rtf"
FRAME_HEIGHT = int(os.getenv("RTF_PREVIEW_UI_FRAME_HEIGHT", "800"))


def _reset_state():
    for key in ["status_code", "html", "error"]:
        if key in st.session_state:
            del st.session_state[key]


def _request_preview(url: str) -> tuple[int, str] | None:
    try:
        resp = requests.get(f"{API_BASE}/", params={"url": url}, timeout=120)
    except requests.RequestException as e:
        st.session_state["error"] = f"Failed to connect to API: {e}"
        return None
    return resp.status_code, resp.text


def main() -> None:
    st.set_page_config(page_title="RTF Preview", page_icon="📄", layout="wide")
    st.title("📄 RTF Preview")
    st.caption(f"API base: {API_BASE}")

    col1, col2 = st.columns([4, 1])
    with col1:
        url = st.text_input("Document URL", value=EXAMPLE_URL)
    with col2:
        st.write("")
        if st.button("Clear", type="secondary"):
            _reset_state()
            st.rerun()

    if st.button("Render", type="primary"):
        _reset_state()
        with st.spinner("Fetching and converting..."):
            res = _request_preview(url)
        if res:
            st.session_state["status_code"], st.session_state["html"] = res

    if "html" in st.session_state:
        status_code = st.session_state["status_code"]
        if status_code == 200:
            st.success("Conversion complete!")
            st.download_button(
                label="Download HTML",
                data=st.session_state["html"].encode("utf-8"),
                file_name="preview.html",
                mime="text/html",
            )
        else:
            st.warning(f"Service answered with status {status_code}")
        components.html(st.session_state["html"], height=FRAME_HEIGHT, scrolling=True)

    if err := st.session_state.get("error"):
        st.error(err)


if __name__ == "__main__":
    main()
