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

import re
import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from urllib.parse import urljoin, quote, urlencode

from geoserver_repository.exceptions import FailedRequestError

logger = logging.getLogger("gsrepository.support")

# characters GeoServer accepts in a generated layer name
LAYER_NAME_PATTERN = re.compile(r"[^A-Za-z0-9_-]")


def build_url(base, seg, query=None):
    """
    Create a URL from a list of path segments and an optional dict of query
    parameters.
    """

    def clean_segment(segment):
        """
        Cleans the segment, keeping the workspace separator of qualified names.
        """
        return quote(str(segment).strip("/"), safe=":")

    seg = (clean_segment(s) for s in seg if s is not None and s != "")
    if query is None or len(query) == 0:
        query_string = ""
    else:
        query_string = f"?{urlencode(query, safe=',')}"
    path = "/".join(seg) + query_string
    adjusted_base = f"{base.rstrip('/')}/"
    return urljoin(adjusted_base, path)


def split_names(names):
    """
    Turns a comma delimited string (or a list) of names into a list,
    dropping blanks.
    """
    if names is None:
        return []
    if isinstance(names, str):
        names = names.split(",")
    return [n.strip() for n in names if n and n.strip()]


def sanitize_layer_name(service_name, native_name):
    """
    Name of the layer re-publishing `native_name` of an external service:
    every character outside [A-Za-z0-9_-] becomes an underscore.
    """
    return LAYER_NAME_PATTERN.sub("_", f"{service_name}_{native_name}")


def parse_json(resp):
    try:
        return resp.json()
    except ValueError as e:
        msg = f"GeoServer gave non-JSON response for [GET {resp.url}]: {resp.text}"
        raise FailedRequestError(msg, resp.status_code, resp.text) from e


def unwrap(record, key):
    """`{"layer": {...}}` -> `{...}`"""
    if isinstance(record, dict) and key in record:
        return record[key]
    raise FailedRequestError(f"Unexpected GeoServer response, missing '{key}': {json.dumps(record)}")


def throttle(values, max_parallel, fn):
    """
    Calls `fn` on every value with at most `max_parallel` calls in flight and
    returns the results in input order.

    Every submitted call is waited for; the first failure (in completion
    order) is raised once the batch has drained.
    """
    values = list(values)
    if not values:
        return []

    results = [None] * len(values)
    first_error = None
    workers = max(1, min(max_parallel, len(values)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = dict((executor.submit(fn, value), index) for index, value in enumerate(values))
        for future in as_completed(futures):
            try:
                results[futures[future]] = future.result()
            except Exception as e:
                if first_error is None:
                    first_error = e
                else:
                    logger.debug(f"Further failure in throttled batch: {e}")

    if first_error is not None:
        raise first_error
    return results
