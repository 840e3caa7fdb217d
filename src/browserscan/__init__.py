"""Find installed web browsers and resolve their versions."""
