from pydantic import BaseModel, model_validator
from typing import List, Literal, Optional


class DemoStep(BaseModel):
    description: str
    code: Optional[str] = None
    visualization: Optional[str] = None


class DemoContent(BaseModel):
    initialCode: Optional[str] = None
    finalCode: Optional[str] = None
    steps: List[DemoStep] = []


class DemoConfig(BaseModel):
    type: Literal["code", "visualization"]
    content: DemoContent

    @model_validator(mode="after")
    def check_step_payloads(self):
        """Each step carries exactly the payload matching the demo type."""
        for idx, step in enumerate(self.content.steps):
            has_code = step.code is not None
            has_visualization = step.visualization is not None
            if has_code == has_visualization or has_code != (self.type == "code"):
                raise ValueError(
                    f"step {idx + 1} must only define '{self.type}' for a {self.type} demo"
                )
        return self


class KnowledgePoint(BaseModel):
    id: str
    title: str
    theory: str
    codeExample: Optional[str] = None
    demoConfig: Optional[DemoConfig] = None


class KnowledgePointSummary(BaseModel):
    id: str
    title: str
