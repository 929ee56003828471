"""Constants for use in various modules"""

# ===============
# Can be changed at runtime
# Bypass potentially time-consuming consistency checks
no_strict_checks = False
# Whether algebras keep tensor-product decompositions
memo_fusion = True
# Whether algebras keep (eager) characters of irreps
memo_characters = True

# Verbosity levels
VDEBUG = 5 # Debugging verbosity level
verbose = 1 # General verbosity: 3 logs plethysm classes, VDEBUG lazy weights
# Level used for progress messages
PROGRESS = 15

import logging,sys
logger = logging.getLogger('lierepslog')
characters_log = logger.getChild('characters')
tensor_log = logger.getChild('tensor')
plethysm_log = logger.getChild('plethysm')
irreps_log = logger.getChild('irreps')
settings_log = logger.getChild('settings')
logger.setLevel(logging.DEBUG)
stdout_handler = logging.StreamHandler(sys.stderr)
stdout_handler.setLevel(logging.ERROR)
stdout_handler.setFormatter(logging.Formatter('[%(asctime)s] %(message)s'))
logger.addHandler(stdout_handler)
logging.addLevelName(PROGRESS, 'PROGRESS')

def setlogging(logfile, fmtstring, level=logging.DEBUG, datefmt=None,mode='a'):
  if level < logger.getEffectiveLevel():
    logger.setLevel(level)
  handler = logging.FileHandler(logfile,mode=mode)
  formatter = logging.Formatter(fmt=fmtstring, datefmt=datefmt)
  handler.setLevel(level)
  handler.setFormatter(formatter)
  logger.addHandler(handler)
  return handler

def setrotlogging(logfile, fmtstring, level=logging.DEBUG,
    datefmt=None,mode='a',size=2**26,count=1000):
  if level < logger.getEffectiveLevel():
    logger.setLevel(level)
  import logging.handlers
  handler = logging.handlers.RotatingFileHandler(logfile,mode=mode,
    maxBytes=size,backupCount=count)
  formatter = logging.Formatter(fmt=fmtstring, datefmt=datefmt)
  handler.setLevel(level)
  handler.setFormatter(formatter)
  logger.addHandler(handler)
  return handler
