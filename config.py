# Configuration options
#


# Program name shown in the usage line.
prog = 'eip55check'

# Logging level for the command line tool; the core only ever logs at DEBUG, so set this to 'DEBUG'
# to see why an address was rejected.
log_level = 'WARNING'

log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
