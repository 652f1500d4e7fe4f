from fastapi import APIRouter
from learnpath.models.knowledge_point import KnowledgePoint, KnowledgePointSummary
from learnpath.services.knowledge_loader import list_knowledge_points, load_knowledge_point
from typing import List

router = APIRouter(prefix="/knowledge-points", tags=["Knowledge Points"])


@router.get("", response_model=List[KnowledgePointSummary])
async def get_knowledge_points():
    """
    Get list of available knowledge points
    """
    return list_knowledge_points()


@router.get("/{kp_id}", response_model=KnowledgePoint)
async def get_knowledge_point(kp_id: str):
    """
    Get a knowledge point with its interactive demo
    """
    return load_knowledge_point(kp_id)
