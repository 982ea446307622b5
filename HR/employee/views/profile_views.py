from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from core.base.exceptions import NotFoundError
from HR.employee.services import ProfileService
from HR.employee.serializers import PROFILE_SERIALIZERS
from .helpers import request_user


@api_view(['GET', 'POST', 'PATCH'])
def employee_profile(request, pk, kind):
    """
    Satellite profile of an employee.

    /hr/employees/<pk>/profiles/<kind>/
    kind: address, education, experience, family, identity, skills

    POST fails with 409 if the profile already exists.
    """
    serializer_class = PROFILE_SERIALIZERS.get(kind)
    if serializer_class is None:
        raise NotFoundError(f"Unknown profile type '{kind}'")

    if request.method == 'GET':
        profile = ProfileService.get(kind, pk)
        return Response(serializer_class(profile).data, status=status.HTTP_200_OK)

    serializer = serializer_class(data=request.data, partial=request.method == 'PATCH')
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    if request.method == 'POST':
        profile = ProfileService.create(request_user(request), kind, pk, serializer.validated_data)
        return Response(serializer_class(profile).data, status=status.HTTP_201_CREATED)

    profile = ProfileService.update(request_user(request), kind, pk, serializer.validated_data)
    return Response(serializer_class(profile).data, status=status.HTTP_200_OK)
