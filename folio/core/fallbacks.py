"""
Sample records shown while a collection has no live data.

Sample ids are never integers so they can't resolve to a stored record.
"""

import copy
import time


def _now_ms():
    return int(time.time() * 1000)


FALLBACK_PROJECTS = [
    {
        'id': 'sample-1',
        'title': 'Sample Project',
        'description': 'This is a fallback project description.',
        'image': '',
        'link': '#',
        'technologies': ['React', 'Tailwind'],
    },
    {
        'id': 'sample-2',
        'title': 'Another Project',
        'description': 'Another fallback project description.',
        'image': '',
        'link': '#',
        'technologies': ['Node.js', 'Express'],
    },
]

FALLBACK_SERVICES = [
    {'id': 'sample-1', 'title': 'Web Development', 'description': 'Build modern websites.', 'icon': ''},
    {'id': 'sample-2', 'title': 'Mobile Apps', 'description': 'Develop cross-platform apps.', 'icon': ''},
]

FALLBACK_HERO_IMAGES = [
    {'id': 'sample-1', 'title': 'Sample Hero', 'subtitle': 'Fallback hero description.', 'image': ''},
    {'id': 'sample-2', 'title': 'Another Hero', 'subtitle': 'Another fallback description.', 'image': ''},
]


def fallback_blogs():
    """Blog samples are dated at the moment they're shown"""
    now = _now_ms()
    return [
        {'title': 'Sample Blog', 'content': 'This is a fallback blog content.',
         'author': 'Admin', 'date': now},
        {'title': 'Another Blog', 'content': 'Another fallback blog content.',
         'author': 'Admin', 'date': now},
    ]


def get_fallback(collection):
    """Fresh copy of the sample records for a collection"""
    if collection == 'blogs':
        return fallback_blogs()
    samples = {
        'projects': FALLBACK_PROJECTS,
        'services': FALLBACK_SERVICES,
        'heroImages': FALLBACK_HERO_IMAGES,
    }[collection]
    return copy.deepcopy(samples)


# Single-record samples used by the dashboard overview counts
OVERVIEW_FALLBACK = {
    'projects': [{'id': 'sample-1', 'title': 'Sample Project'}],
    'blogs': [{'id': 'sample-1', 'title': 'Sample Blog'}],
    'heroImages': [{'id': 'sample-1', 'title': 'Sample Image'}],
    'services': [{'id': 'sample-1', 'title': 'Sample Service'}],
}
