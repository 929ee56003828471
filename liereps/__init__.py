"""Exact representation theory of simple Lie algebras: root systems, Weyl
group, characters, tensor products & plethysms"""
from . import config
from .errors import (LieRepError, AlgebraMismatchError, InvalidLabelError,
  ConsistencyError, NonIntegralPlethysmError)
from .liealgebra import (SimpleLieAlgebra, dynkin_to_cartan, cartan_matrix,
  A_series, B_series, C_series, D_series, E_series, F_series, G_series,
  SU, SO, Sp)
from .weights import (Weight, inner_product, simple_roots, positive_roots,
  weyl_vector, fundamental_weights, simple_root_squared_lengths)
from .weyl import (simple_reflection, is_dominant, reflect_to_dominant,
  weyl_orbit, weyl_group_order, WeylWord, longest_weyl_word)
from .characters import Character, character, dominant_weights
from .irreps import (Irrep, Rep, IrrepCache, default_irrep_cache,
  irreps_up_to_dim, clear_irreps_cache)
from .tensor import tensor_product, klimyk
from .symmetric import (Partition, SymmetricIrrep, ConjugacyClass,
  SymmetricGroup, all_partitions, conjugacy_class_size, hook_length,
  character_table)
from .symmetric import dimension as _sym_dimension
from .plethysm import (alternating_dominant, virtual_decomposition, adams,
  plethysm, symmetric_power, antisymmetric_power)
from .settingsman import apply_settings, load_settings


def dimension(irrep):
  """Weyl dimension of an Irrep (or hook-length dimension of a
  SymmetricIrrep)"""
  if isinstance(irrep, SymmetricIrrep):
    return _sym_dimension(irrep)
  return irrep.dim

def adjoint_irrep(algebra):
  return Irrep._make(algebra, algebra.adjoint_labels)

def quadratic_casimir(irrep):
  return irrep.quadratic_casimir()

def dynkin_index(irrep):
  return irrep.dynkin_index()

def conjugate(irrep):
  return irrep.dual()
