# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .spectralpower import SpectralPower
from .powermethod import PowerMethod
from .poweriteration import PowerIteration, PowerIterationResult
from .errors import DimensionMismatch, DegenerateVector
