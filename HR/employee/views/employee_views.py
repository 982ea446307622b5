from datetime import date

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from HR.employee.services import EmployeeService, EmployeeOnboardingService
from HR.employee.serializers import (
    EmployeeSerializer,
    EmployeeLookupSerializer,
    EmployeeCreateSerializer,
    EmployeeUpdateSerializer,
    EmployeeOnboardSerializer,
    EmployeeDetailSerializer,
    onboarding_result_data,
)
from hr_project.pagination import paginated_response
from .helpers import request_user


@api_view(['GET', 'POST'])
def employee_list(request):
    """
    List employees or create one.

    GET /hr/employees/
    - Filters: status, search (first/last name or employee code)

    POST /hr/employees/
    - Creates the employee only; job fields are ignored (see onboard)
    """
    if request.method == 'GET':
        employees = EmployeeService.list_employees(request.query_params)
        return paginated_response(request, employees, EmployeeSerializer)

    elif request.method == 'POST':
        serializer = EmployeeCreateSerializer(data=request.data)
        if serializer.is_valid():
            employee = EmployeeService.create(request_user(request), serializer.to_dto())
            return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def employee_lookup(request):
    """
    Short employee list for pickers.

    GET /hr/employees/lookup/?search=&status=&limit=
    """
    limit = request.query_params.get('limit')
    try:
        limit = int(limit) if limit else None
    except ValueError:
        return Response({'limit': ['Must be an integer']}, status=status.HTTP_400_BAD_REQUEST)

    employees = EmployeeService.find(request.query_params, limit)
    return Response(EmployeeLookupSerializer(employees, many=True).data, status=status.HTTP_200_OK)


@api_view(['POST'])
def employee_onboard(request):
    """
    Create an employee together with its dependents.

    POST /hr/employees/onboard/
    - 201 with {employee, dependent_results}; individual dependents may
      have failed, check each outcome
    """
    serializer = EmployeeOnboardSerializer(data=request.data)
    if serializer.is_valid():
        result = EmployeeOnboardingService.create_employee_with_details(
            request_user(request), serializer.to_dto()
        )
        return Response(onboarding_result_data(result), status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PATCH', 'DELETE'])
def employee_detail(request, pk):
    """
    Retrieve (with details), update or terminate an employee.

    DELETE marks the employee terminated; nothing is removed.
    Optional body/query: termination_date
    """
    if request.method == 'GET':
        employee = EmployeeService.get_with_details(pk)
        return Response(EmployeeDetailSerializer(employee).data, status=status.HTTP_200_OK)

    elif request.method == 'PATCH':
        serializer = EmployeeUpdateSerializer(data=request.data)
        if serializer.is_valid():
            employee = EmployeeService.update(request_user(request), serializer.to_dto(pk))
            return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    elif request.method == 'DELETE':
        termination_date = request.data.get('termination_date') or request.query_params.get('termination_date')
        if termination_date:
            try:
                termination_date = date.fromisoformat(termination_date)
            except ValueError:
                return Response(
                    {'termination_date': ['Use YYYY-MM-DD format']},
                    status=status.HTTP_400_BAD_REQUEST
                )
        employee = EmployeeService.terminate(request_user(request), pk, termination_date or None)
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)
