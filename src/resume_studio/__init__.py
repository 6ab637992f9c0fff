def main() -> None:
    """Entry point for the application: start the API server."""
    from resume_studio.api.main import main as api_main

    api_main()
