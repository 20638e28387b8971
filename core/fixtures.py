# Static board data for the Resource Hub and Live Telemetry views.

ACTIVE_FLIGHTS = [
    {
        'id': '6E-482',
        'gate': 'A1',
        'aircraft': 'A320',
        'predicted_tat': 75,
        'base_tat': 45,
        'risk': 'High',
        'bottleneck': 'Catering',
        'status': {'baggage': 'Moderate', 'fuel': 'Stable', 'catering': 'Critical'},
        'recommended_action': 'Prioritize Catering Crew for Flight 6E-482',
        'savings': 1950,
    },
    {
        'id': 'UK-911',
        'gate': 'B4',
        'aircraft': 'B777',
        'predicted_tat': 65,
        'base_tat': 60,
        'risk': 'Low',
        'bottleneck': 'None',
        'status': {'baggage': 'Stable', 'fuel': 'Stable', 'catering': 'Stable'},
        'recommended_action': None,
        'savings': 0,
    },
    {
        'id': 'AI-101',
        'gate': 'C2',
        'aircraft': 'A350',
        'predicted_tat': 82,
        'base_tat': 60,
        'risk': 'Medium',
        'bottleneck': 'Baggage',
        'status': {'baggage': 'Delay Risk', 'fuel': 'Stable', 'catering': 'Stable'},
        'recommended_action': 'Divert Baggage Team from Gate B4 to C2',
        'savings': 1430,
    },
    {
        'id': 'QP-221',
        'gate': 'A5',
        'aircraft': 'B737',
        'predicted_tat': 55,
        'base_tat': 45,
        'risk': 'Medium',
        'bottleneck': 'Fuel',
        'status': {'baggage': 'Stable', 'fuel': 'Delay Risk', 'catering': 'Stable'},
        'recommended_action': 'Dispatch Backup Fuel Truck to A5',
        'savings': 650,
    },
]

# Share of delay minutes by contributor, in percent
DELAY_CONTRIBUTORS = [
    {'name': 'Catering', 'value': 38},
    {'name': 'Baggage', 'value': 32},
    {'name': 'Fuel', 'value': 15},
    {'name': 'Boarding', 'value': 15},
]

LIVE_STATUS = [
    {'task': 'Aircraft Arrived at Gate', 'time': '14:02', 'status': 'completed', 'progress': 100},
    {'task': 'Chocks On & Engines Off', 'time': '14:05', 'status': 'completed', 'progress': 100},
    {'task': 'Baggage Unloading', 'time': '14:10', 'status': 'in-progress', 'progress': 65},
    {'task': 'Catering Replenishment', 'time': '14:12', 'status': 'in-progress', 'progress': 40},
    {'task': 'Fueling', 'time': 'Pending', 'status': 'pending', 'progress': 0},
    {'task': 'Boarding Commences', 'time': 'Pending', 'status': 'pending', 'progress': 0},
]
