"""Landing page content store and site."""
