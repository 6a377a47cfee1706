from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.core.db import get_db
from complaintdesk.schemas.homepage.homepage_schemas import HomepageData
from complaintdesk.services.homepage.homepage_service import get_homepage_data
from complaintdesk.utils.response import success_response, APIResponse

router = APIRouter(prefix="/homepage", tags=["Homepage"])


# Public: no authentication
@router.get("/data", response_model=APIResponse[HomepageData])
async def homepage_data_api(db: AsyncSession = Depends(get_db)):
    data = await get_homepage_data(db)
    return success_response("Homepage data fetched", data)
