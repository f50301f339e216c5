# passgen
# (XKCD-style passphrase generator)
#

__version__ = '0.2.0'
