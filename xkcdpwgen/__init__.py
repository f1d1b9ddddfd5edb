"""Generate memorable passphrases the XKCD way."""
