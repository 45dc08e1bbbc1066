"""Streamlit entry point: streamlit run streamlit_app.py"""

from gendergap.visualization.app import main

main()
