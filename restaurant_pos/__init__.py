"""Restaurant point-of-sale terminal."""
