"""Reviews app package: star ratings and written reviews of spots."""
