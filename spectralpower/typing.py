# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of spectralpower."""

from .linearoperator import Operator, ArrayOperator
from .matrixoperator import MatrixOperator
from .callableoperator import CallableOperator
from .linearmap import LinearMap

from .powermethod import PowerMethod
from .poweriteration import PowerIteration, PowerIterationResult

from .options import Options, IterationOptions, RandomOptions, OptionType
from .errors import DimensionMismatch, DegenerateVector

from .spectralpower import SpectralPower
