"""Member capacity and availability engine for organization staffing."""
