"""Choice parameter contract for the minimal example package."""

from __future__ import annotations

from choiceflow.autodefine import coerce_to_param_spec

REGIONS = {
    "eu": ["eu-west-1", "eu-central-1"],
    "us": ["us-east-1", "us-west-2"],
}


def region_choices(context):
    zone = context.get("ZONE", "")
    if zone in REGIONS:
        return REGIONS[zone]
    return [region for regions in REGIONS.values() for region in regions]


def get_param_spec():
    return coerce_to_param_spec(
        {
            "name": "REGION",
            "description": "Deployment region.",
            "choices": region_choices,
            "choice_type": "PT_MULTI_SELECT",
            "max_visible_items": 3,
        }
    )
