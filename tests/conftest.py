import pytest
from liereps import config
from liereps.groups import GroupType
from liereps.irreps import clear_irreps_cache


@pytest.fixture
def restore_config():
  saved = {k:getattr(config,k) for k in
    ('no_strict_checks','memo_fusion','memo_characters','verbose')}
  handlers = list(config.logger.handlers)
  yield config
  for k,v in saved.items():
    setattr(config,k,v)
  for h in config.logger.handlers[:]:
    if h not in handlers:
      config.logger.removeHandler(h)
      h.close()


@pytest.fixture
def fresh_caches():
  clear_irreps_cache()
  for group in GroupType._registry.values():
    group.clear_caches()
  yield
  clear_irreps_cache()
