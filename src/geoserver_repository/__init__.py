# -*- coding: utf-8 -*-
#########################################################################
#
# Copyright 2019, GeoSolutions Sas.
# All rights reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE.txt file in the root directory of this source tree.
#
#########################################################################

from geoserver_repository.config import RepositoryConfig  # noqa: F401
from geoserver_repository.exceptions import (  # noqa: F401
    ConflictingDataError,
    FailedRequestError,
    InvalidConfigurationError,
    RequestTimeoutError,
    UnknownResourceTypeError,
)
from geoserver_repository.repository import GeoserverRepository  # noqa: F401
from geoserver_repository.resolver import GeoserverTypes  # noqa: F401

__version__ = "1.0.0"
