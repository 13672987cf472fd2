"""StreamBox: catalog, search and recommendations for a video-streaming demo."""
