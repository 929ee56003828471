import pytest
from liereps import (A_series, B_series, C_series, D_series, E_series,
  G_series, F_series, Irrep, Rep, tensor_product, klimyk, config,
  adjoint_irrep, character, conjugate, AlgebraMismatchError)


def rep(algebra, comps):
  return Rep(algebra, comps)


class TestKnownProducts:
  def test_su3(self):
    g = A_series(2)
    three = Irrep(g,1,0)
    threebar = Irrep(g,0,1)
    assert tensor_product(three,three) == rep(g,{(2,0):1,(0,1):1})
    assert tensor_product(three,threebar) == rep(g,{(1,1):1,(0,0):1})

  def test_su3_octets(self):
    g = A_series(2)
    eight = Irrep(g,1,1)
    assert tensor_product(eight,eight) == \
      rep(g,{(2,2):1,(3,0):1,(0,3):1,(1,1):2,(0,0):1})

  def test_su2(self):
    g = A_series(1)
    assert tensor_product(Irrep(g,1),Irrep(g,1)) == rep(g,{(2,):1,(0,):1})
    assert tensor_product(Irrep(g,2),Irrep(g,3)) == \
      rep(g,{(5,):1,(3,):1,(1,):1})

  def test_g2(self):
    g = G_series(2)
    seven = Irrep(g,1,0)
    assert tensor_product(seven,seven) == \
      rep(g,{(2,0):1,(0,1):1,(1,0):1,(0,0):1})

  def test_so5_spinors(self):
    g = B_series(2)
    four = Irrep(g,0,1)
    assert tensor_product(four,four) == rep(g,{(0,2):1,(1,0):1,(0,0):1})

  def test_trivial_factor(self):
    g = F_series(4)
    r = Irrep(g,0,0,0,1)
    assert tensor_product(Irrep(g,0,0,0,0),r) == Rep.from_irrep(r)

  def test_klimyk_list(self):
    g = A_series(2)
    assert sorted(klimyk(g,(1,0),(1,0))) == [((0,1),1),((2,0),1)]


class TestProperties:
  @pytest.mark.parametrize('a,b',[
    (Irrep(A_series(3),1,0,1),Irrep(A_series(3),0,1,0)),
    (Irrep(B_series(3),0,0,1),Irrep(B_series(3),1,0,0)),
    (Irrep(C_series(3),1,1,0),Irrep(C_series(3),0,0,1)),
    (Irrep(D_series(4),0,0,1,0),Irrep(D_series(4),0,0,0,1)),
    (Irrep(G_series(2),1,1),Irrep(G_series(2),1,0))])
  def test_commutative_and_dimension(self, a, b, fresh_caches):
    ab = tensor_product(a,b)
    assert ab == tensor_product(b,a)
    assert ab.dim == a.dim*b.dim
    assert not ab.is_virtual()

  def test_contains_trivial_only_with_dual(self):
    g = A_series(3)
    r = Irrep(g,1,1,0)
    assert Irrep(g,0,0,0) in tensor_product(r,r.dual())
    assert Irrep(g,0,0,0) not in tensor_product(r,r)

  def test_bilinear(self):
    g = A_series(2)
    a = Irrep(g,1,0)
    b = Irrep(g,0,1)
    c = Irrep(g,1,1)
    assert tensor_product(a+b,c) == tensor_product(a,c) + tensor_product(b,c)
    assert tensor_product(2*a,a+b) == \
      2*tensor_product(a,a) + 2*tensor_product(a,b)

  def test_virtual_rep(self):
    g = A_series(2)
    virtual = Rep(g,{(2,0):1,(0,1):-1})
    product = tensor_product(virtual,Irrep(g,1,0))
    assert product.dim == 9
    assert product == tensor_product(Irrep(g,2,0),Irrep(g,1,0)) - \
      tensor_product(Irrep(g,0,1),Irrep(g,1,0))

  def test_mismatch(self):
    with pytest.raises(AlgebraMismatchError):
      tensor_product(Irrep(A_series(2),1,0),Irrep(G_series(2),1,0))


class TestMemoization:
  def test_fusion_stored_both_orders(self, fresh_caches, restore_config):
    g = C_series(2)
    tensor_product(Irrep(g,1,0),Irrep(g,0,1))
    assert ((1,0),(0,1)) in g._fusion
    assert ((0,1),(1,0)) in g._fusion

  def test_no_memo(self, fresh_caches, restore_config):
    config.memo_fusion = False
    g = D_series(5)
    r = adjoint_irrep(g)
    product = tensor_product(Irrep(g,1,0,0,0,0),r)
    assert not g._fusion
    assert product.dim == 450


class TestWithoutStrictChecks:
  def test_results_unchanged(self, fresh_caches, restore_config):
    config.no_strict_checks = True
    g = G_series(2)
    char = character(Irrep(g,1,1))
    assert char.dim == 64
    assert char[(0,0)] == 4
    assert tensor_product(Irrep(g,1,0),Irrep(g,1,0)) == \
      rep(g,{(2,0):1,(0,1):1,(1,0):1,(0,0):1})
    assert tensor_product(Irrep(A_series(2),1,1),Irrep(A_series(2),1,1)) == \
      rep(A_series(2),{(2,2):1,(3,0):1,(0,3):1,(1,1):2,(0,0):1})
    assert conjugate(Irrep(E_series(6),1,0,0,0,0,0)).labels == (0,0,0,0,1,0)
    assert conjugate(Irrep(D_series(5),0,0,0,1,0)).labels == (0,0,0,0,1)
    assert conjugate(Irrep(A_series(3),1,2,0)).labels == (0,2,1)
