# users/serializers.py

from rest_framework import serializers


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Authentication is handled in the view.
    """
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )


# ---------------- ASSIGNMENTS ----------------
class AssignmentSerializer(serializers.Serializer):
    businessUnitId = serializers.UUIDField(source="business_unit_id")
    businessUnit = serializers.SerializerMethodField()
    role = serializers.CharField()

    def get_businessUnit(self, obj):
        return {"id": obj.business_unit.id, "name": obj.business_unit.name}


# ---------------- SESSION IDENTITY ----------------
class SessionUserSerializer(serializers.Serializer):
    """
    The identity handlers authorize against:
    assignment set + primary role.
    """
    id = serializers.UUIDField()
    email = serializers.EmailField()
    name = serializers.CharField()
    isActive = serializers.BooleanField(source="is_active")
    role = serializers.CharField(source="primary_role", allow_null=True)
    assignments = serializers.SerializerMethodField()

    def get_assignments(self, obj):
        qs = obj.assignments.select_related("business_unit").order_by("created_at")
        return AssignmentSerializer(qs, many=True).data
