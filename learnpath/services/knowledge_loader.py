import yaml
import os
import logging
from typing import List

import pydantic

from learnpath.config import settings
from learnpath.errors import NotFound, ValidationError
from learnpath.models.knowledge_point import (
    DemoConfig,
    DemoContent,
    DemoStep,
    KnowledgePoint,
    KnowledgePointSummary,
)

logger = logging.getLogger(__name__)


def _knowledge_point_path(kp_id: str, directory: str) -> str:
    return os.path.join(directory, f"{kp_id}.yaml")


def _build_demo(demo_data) -> DemoConfig:
    steps = [
        DemoStep(
            description=step['description'].strip(),
            code=step.get('code'),
            visualization=step.get('visualization'),
        )
        for step in demo_data.get('steps', [])
    ]
    return DemoConfig(
        type=demo_data['type'],
        content=DemoContent(
            initialCode=demo_data.get('initial_code'),
            finalCode=demo_data.get('final_code'),
            steps=steps,
        ),
    )


def load_knowledge_point(kp_id: str, directory: str = None) -> KnowledgePoint:
    """Load a knowledge point and its interactive demo from a YAML file"""
    directory = directory or settings.KNOWLEDGE_POINTS_DIR
    # Ids are file stems; anything path-like can't name a knowledge point
    if os.path.basename(kp_id) != kp_id or kp_id.startswith('.'):
        raise NotFound("Knowledge point not found")

    kp_path = _knowledge_point_path(kp_id, directory)
    if not os.path.exists(kp_path):
        raise NotFound("Knowledge point not found")

    with open(kp_path, 'r', encoding='utf-8') as file:
        kp_data = yaml.safe_load(file) or {}

    try:
        demo_data = kp_data.get('demo')
        return KnowledgePoint(
            id=kp_id,
            title=kp_data['title'],
            theory=kp_data['theory'].strip(),
            codeExample=kp_data.get('code_example'),
            demoConfig=_build_demo(demo_data) if demo_data else None,
        )
    except KeyError as e:
        raise ValidationError(f"Knowledge point {kp_id} is missing {e.args[0]}")
    except pydantic.ValidationError as e:
        raise ValidationError(f"Knowledge point {kp_id} is malformed: {e.errors()[0]['msg']}")


def list_knowledge_points(directory: str = None) -> List[KnowledgePointSummary]:
    directory = directory or settings.KNOWLEDGE_POINTS_DIR
    if not os.path.isdir(directory):
        logger.warning(f"Knowledge point directory {directory} does not exist")
        return []
    kp_ids = sorted(f[:-len('.yaml')] for f in os.listdir(directory) if f.endswith('.yaml'))

    summaries = []
    for kp_id in kp_ids:
        try:
            kp = load_knowledge_point(kp_id, directory)
        except (ValidationError, yaml.YAMLError) as e:
            logger.error(f"Error loading knowledge point {kp_id}: {str(e)}")
            continue
        summaries.append(KnowledgePointSummary(id=kp.id, title=kp.title))
    return summaries
