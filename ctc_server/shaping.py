def shape_salary_response(salary_request, data):
    """Build the JSON body returned to the frontend from a parsed model result."""
    status = data.get("status")
    if status == "mismatch":
        return {
            "success": False,
            "status": "mismatch",
            **salary_request.as_dict(),
            "analysis": data.get("analysis") or data.get("notes"),
            "research_findings": None,
            "monthly_breakdown": None,
            "notes": None,
        }
    return {
        "success": status == "success",
        "status": status,
        **salary_request.as_dict(),
        "research_findings": data.get("research_findings") or None,
        "monthly_breakdown": data.get("monthly_breakdown") or None,
        "notes": data.get("notes") or None,
    }
