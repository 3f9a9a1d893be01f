import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from api.dependencies import get_engine
from api.schemas import EngineStateResponse
from application.services import ConversionEngine
from domain.models.currency import EngineState

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api', tags=['websockets'])


@router.websocket('/ws/state')
async def state_stream(
	websocket: WebSocket,
	engine: Annotated[ConversionEngine, Depends(get_engine)],
):
	"""
	Push a state snapshot on connect and after every engine mutation.
	"""
	await websocket.accept()
	updates: asyncio.Queue[EngineState] = asyncio.Queue()
	unsubscribe = engine.subscribe(updates.put_nowait)
	logger.info('State stream client connected')

	try:
		await websocket.send_json(EngineStateResponse.from_state(engine.state).model_dump(mode='json'))
		while True:
			state = await updates.get()
			await websocket.send_json(EngineStateResponse.from_state(state).model_dump(mode='json'))
	except WebSocketDisconnect:
		logger.info('State stream client disconnected')
	finally:
		unsubscribe()
