"""
Streamlit client for the recommendation API.

Run: streamlit run tossremote/ui/app.py --server.port 8501
"""
