#!/usr/bin/env python
"""
Wrapper script to run the Streamlit face compare app.
"""
import sys
from pathlib import Path

if __name__ == "__main__":
    import streamlit.web.cli as stcli

    # Get the path to the app
    app_path = Path(__file__).parent / "facecompare" / "ui" / "face_compare_app.py"

    # Run the app
    sys.argv = ["streamlit", "run", str(app_path)]
    stcli.main()
