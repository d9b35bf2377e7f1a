"""
GeoJSON Feature helpers.

Small constructors used to reassemble buffered output, plus unwrapping of
Feature / FeatureCollection input down to plain geometries.
"""

import copy
from typing import Any, Dict, Iterator, List, Optional


def make_feature(geometry: Dict,
                 properties: Optional[Dict] = None,
                 feature_id: Any = None) -> Dict:
    """
    Wrap a geometry into a GeoJSON Feature.

    Properties are deep-copied so the output never aliases caller data.
    """
    feature = {
        'type': 'Feature',
        'properties': copy.deepcopy(properties) if properties else {},
        'geometry': geometry
    }
    if feature_id is not None:
        feature['id'] = feature_id
    return feature


def make_feature_collection(features: List[Dict]) -> Dict:
    return {
        'type': 'FeatureCollection',
        'features': list(features)
    }


def iter_geometries(geojson: Dict) -> Iterator[Dict]:
    """Yield the non-null geometries of a geometry, Feature or FeatureCollection."""
    geojson_type = geojson.get('type')

    if geojson_type == 'FeatureCollection':
        for feature in geojson.get('features', []):
            yield from iter_geometries(feature)
    elif geojson_type == 'Feature':
        if geojson.get('geometry') is not None:
            yield geojson['geometry']
    else:
        yield geojson
