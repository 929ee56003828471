import tomlkit
import logging
import os.path
from sympy.parsing import sympy_parser
from . import config
from .config import settings_log as logger

# Settings that may be given in files or dicts, with their types
setting_types = dict(no_strict_checks=bool, memo_fusion=bool,
  memo_characters=bool, verbose=int, logfile=str, logformat=str,
  loglevel=int, logrotate=bool)
setting_defaults = dict(logfile=None, logformat='[%(asctime)s] %(message)s',
  loglevel=logging.DEBUG, logrotate=False)
val_transformations = sympy_parser.standard_transformations \
  + (sympy_parser.convert_xor,sympy_parser.implicit_multiplication,
      sympy_parser.factorial_notation)


def parse_value(key, value):
  """Coerce value for setting key to its declared type
  Integers may be given as expressions parseable by sympy"""
  if key not in setting_types:
    raise KeyError('Unrecognized setting %s'%key)
  vtype = setting_types[key]
  if value is None:
    return None
  if vtype is str:
    return str(value)
  if vtype is bool:
    if isinstance(value, str):
      if value.lower() in ('true','yes','1'):
        return True
      if value.lower() in ('false','no','0'):
        return False
      raise ValueError('Setting %s expects boolean, got %r'%(key,value))
    return bool(value)
  if isinstance(value, str):
    if key == 'loglevel' and isinstance(logging.getLevelName(value.upper()),int):
      return logging.getLevelName(value.upper())
    expr = sympy_parser.parse_expr(value, transformations=val_transformations)
    if not expr.is_integer:
      raise ValueError('Setting %s expects integer, got %s = %s'\
        %(key,value,expr))
    return int(expr)
  return int(value)


class SettingsLoader:
  """Load settings from a table of a TOML file
  A table may name a 'parent' table (optionally in 'parent-file') whose
  settings it inherits & overrides"""
  def __init__(self, filename, key='liereps'):
    logger.info('Loading settings from table %s of %s',key,filename)
    with open(filename,'r') as f:
      confs = tomlkit.parse(f.read())
    table = dict(confs[key])
    if 'parent' in table:
      if 'parent-file' in table:
        # Relative to the file naming it
        fparent = os.path.join(os.path.dirname(filename),
          str(table.pop('parent-file')))
      else:
        fparent = filename
      self._parent = SettingsLoader(fparent, str(table.pop('parent')))
    else:
      self._parent = None
    self.settings = {}
    for k,v in table.items():
      if hasattr(v, 'unwrap'):
        v = v.unwrap()
      self.settings[k] = parse_value(k, v)
    if self._parent is not None:
      self.settings = self._parent.settings | self.settings
    logger.debug('Found settings %s',self.settings)


def load_settings(*sources):
  """Combine settings from sources: filenames, (filename, key) pairs or
  dicts. Earlier sources take precedence"""
  settings = {}
  for src in sources:
    if isinstance(src, dict):
      found = {k:parse_value(k,v) for k,v in src.items()}
      logger.debug('Found settings %s in dict',found)
    elif isinstance(src, (tuple,list)):
      found = SettingsLoader(*src).settings
    else:
      found = SettingsLoader(src).settings
    settings = found | settings
  return settings

def apply_settings(*sources):
  """Load settings (as in load_settings) and apply them to config"""
  settings = setting_defaults | load_settings(*sources)
  for key in ('no_strict_checks','memo_fusion','memo_characters','verbose'):
    if key in settings:
      logger.log(config.PROGRESS,'Setting %s to %s',key,settings[key])
      setattr(config, key, settings[key])
  if settings['logfile'] is not None:
    if settings['logrotate']:
      config.setrotlogging(settings['logfile'],settings['logformat'],
        settings['loglevel'])
    else:
      config.setlogging(settings['logfile'],settings['logformat'],
        settings['loglevel'])
  return settings
