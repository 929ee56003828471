from fractions import Fraction
import threading
import pytest
from liereps import (A_series, B_series, C_series, D_series, F_series,
  G_series, Irrep, Weight, character, dominant_weights, weyl_orbit, config,
  AlgebraMismatchError)
from liereps.characters import Character


class TestEagerCharacter:
  def test_a2_adjoint(self):
    char = character(Irrep(A_series(2),1,1))
    assert len(char) == 7
    assert char[Weight.zero(A_series(2))] == 2
    assert char[(1,1)] == 1
    assert char.dim == 8

  def test_highest_weight_multiplicity_one(self):
    for r in (Irrep(B_series(3),1,0,1),Irrep(G_series(2),1,1),
        Irrep(C_series(3),0,2,0)):
      assert character(r)[r.highest_weight] == 1

  def test_dominant_weights(self):
    assert dominant_weights(Irrep(A_series(2),2,2)) == \
      {(2,2):1,(3,0):1,(0,3):1,(1,1):2,(0,0):3}

  def test_zero_weight_of_adjoints(self):
    for g in (A_series(3),B_series(3),C_series(2),D_series(4),G_series(2)):
      adj = Irrep(g,g.adjoint_labels)
      assert character(adj)[Weight.zero(g)] == g.rank
      assert character(adj).dim == g.dimension

  def test_g2_fundamental(self):
    char = character(Irrep(G_series(2),1,0))
    assert char.dim == 7
    assert sorted(char.values()) == 7*[1]

  def test_f4_26(self):
    char = character(Irrep(F_series(4),0,0,0,1))
    assert char.dim == 26
    assert char[Weight.zero(F_series(4))] == 2

  def test_weyl_invariance(self):
    char = character(Irrep(B_series(2),2,1))
    for w,m in char.items():
      orbit = weyl_orbit(w)
      for v in orbit[1] + orbit[-1]:
        assert char[v] == m

  def test_trivial(self):
    g = D_series(5)
    char = character(Irrep(g,0,0,0,0,0))
    assert dict(char.items()) == {Weight.zero(g):1}

  def test_outside_weights(self):
    char = character(Irrep(A_series(2),1,0))
    assert char[(2,0)] == 0
    assert char[(Fraction(1,2),0)] == 0
    assert (2,0) not in char
    assert (1,0) in char

  def test_memoized_on_algebra(self, restore_config):
    g = C_series(3)
    r = Irrep(g,1,1,0)
    assert character(r) is character(r)
    g.clear_caches()
    config.memo_characters = False
    assert character(r) is not character(r)

  def test_algebra_mismatch(self):
    char = character(Irrep(A_series(2),1,0))
    with pytest.raises(AlgebraMismatchError):
      char[Weight(B_series(2),(1,0))]


class TestLazyCharacter:
  @pytest.mark.parametrize('r',[Irrep(A_series(2),2,2),
    Irrep(B_series(3),1,0,1),Irrep(G_series(2),2,0),Irrep(C_series(3),1,0,1),
    Irrep(D_series(4),0,1,0,0)])
  def test_agrees_with_eager(self, r):
    eager = character(r)
    lazy = character(r, lazy=True)
    for w,m in eager.items():
      assert lazy[w] == m

  def test_query_order_irrelevant(self):
    r = Irrep(B_series(2),2,2)
    eager = character(r)
    weights = sorted(eager, key=lambda w: w.coords)
    lazy = character(r, lazy=True)
    for w in weights:
      assert lazy[w] == eager[w]

  def test_outside_is_zero(self):
    lazy = character(Irrep(A_series(2),1,0), lazy=True)
    assert lazy[(2,0)] == 0
    assert lazy[(Fraction(1,2),0)] == 0
    assert lazy[(0,0)] == 0
    assert lazy[(-1,1)] == 1

  def test_grows_on_demand(self):
    lazy = character(Irrep(A_series(2),2,2), lazy=True)
    # Only the highest-weight orbit to start with
    assert len(lazy) == 6
    assert lazy[(0,0)] == 3
    assert len(lazy) == 19
    assert lazy.dim == 27

  def test_concurrent_queries(self):
    r = Irrep(C_series(3),2,0,1)
    eager = character(r)
    lazy = Character(r, lazy=True)
    weights = list(eager)
    results = {}
    def worker(k):
      results[k] = [lazy[w] for w in weights[k::4]]
    threads = [threading.Thread(target=worker,args=(k,)) for k in range(4)]
    for t in threads:
      t.start()
    for t in threads:
      t.join()
    for k in range(4):
      assert results[k] == [eager[w] for w in weights[k::4]]

  def test_verbose_logs_resolution(self, restore_config, caplog):
    caplog.set_level(config.VDEBUG, logger='lierepslog')
    r = Irrep(A_series(2),1,1)
    character(r, lazy=True)[(0,0)]
    assert not any('Resolved' in rec.getMessage() for rec in caplog.records)
    config.verbose = config.VDEBUG
    character(r, lazy=True)[(0,0)]
    assert any('Resolved' in rec.getMessage() for rec in caplog.records)
