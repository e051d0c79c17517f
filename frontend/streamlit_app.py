"""
Streamlit entry point.

    streamlit run frontend/streamlit_app.py

Streamlit puts this file's directory on sys.path, not the project root, so
the root is added here before importing the page.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from frontend.ui import render

render()
