from fastapi.responses import JSONResponse


class MovieJSONResponse(JSONResponse):
    # Starlette only appends a charset to text/* types
    media_type = 'application/json; charset=UTF-8'
