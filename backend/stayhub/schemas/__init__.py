"""Pydantic schemas for the StayHub API."""

from stayhub.schemas.auth import *
from stayhub.schemas.property import *
from stayhub.schemas.booking import *
