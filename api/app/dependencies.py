from typing import Annotated

from fastapi import Depends, Request

from app.models.llm_cloud import RoastLLM


def get_roast_llm(request: Request) -> RoastLLM:
    return request.app.state.roast_llm


RoastLLMDep = Annotated[RoastLLM, Depends(get_roast_llm)]
