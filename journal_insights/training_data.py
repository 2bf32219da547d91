"""Default labeled corpus of business journal entries."""

from typing import Any

from .models.training import TrainingExample


def _record(
    id: str,
    text: str,
    category: str,
    mood: str,
    energy: str,
    confidence_range: tuple[int, int],
    business_context: str,
) -> dict[str, Any]:
    return {
        "id": id,
        "version": 1,
        "text": text,
        "expected_category": category,
        "expected_mood": mood,
        "expected_energy": energy,
        "confidence_range": confidence_range,
        "business_context": business_context,
        "source": "handwritten",
    }


BUSINESS_JOURNAL_TRAINING_DATA: list[dict[str, Any]] = [
    _record(
        "SUPPLY_CHAIN_001",
        "Supplier delayed the raw material shipment by two weeks, and now our "
        "production schedule is at risk",
        "Challenge", "Frustrated", "medium", (85, 95),
        "Supply chain disruption impacting production timelines",
    ),
    _record(
        "REVENUE_GROWTH_001",
        "We closed five new accounts this week, and our monthly recurring revenue "
        "is now at an all-time high",
        "Growth", "Excited", "high", (90, 95),
        "Rapid customer acquisition driving financial growth",
    ),
    _record(
        "RESEARCH_ACHIEVEMENT_001",
        "Finally published our first industry research paper - the team's hard "
        "work has paid off",
        "Achievement", "Proud", "high", (85, 95),
        "Successful completion of a major intellectual deliverable",
    ),
    _record(
        "GROWTH_001",
        "We hired three new developers this week and they're already contributing "
        "to the codebase",
        "Growth", "optimistic", "high", (80, 90),
        "Team expansion and hiring success",
    ),
    _record(
        "CHALLENGE_001",
        "Cash flow is tight this month and we need to delay some payments",
        "Challenge", "worried", "low", (85, 95),
        "Financial constraints and cash flow management",
    ),
    _record(
        "ACHIEVEMENT_001",
        "Successfully launched our new product feature and customer feedback has "
        "been overwhelmingly positive",
        "Achievement", "excited", "high", (90, 95),
        "Product launch success and customer satisfaction",
    ),
    # Challenges
    _record(
        "FINANCIAL_CRISIS_001",
        "Bank called today - we're dangerously close to our credit limit and "
        "customers are paying invoices slower than usual",
        "Challenge", "Worried", "low", (90, 95),
        "Severe financial strain and working capital issues",
    ),
    _record(
        "TECH_OUTAGE_001",
        "Our entire platform went down for 4 hours during peak business time - "
        "lost thousands in potential revenue",
        "Challenge", "Frustrated", "medium", (88, 94),
        "Technical infrastructure failure with business impact",
    ),
    _record(
        "CUSTOMER_CHURN_001",
        "Three major clients canceled their contracts this week citing budget "
        "cuts - this hits our quarterly numbers hard",
        "Challenge", "Devastated", "low", (85, 92),
        "Significant customer loss affecting revenue projections",
    ),
    _record(
        "TALENT_LOSS_001",
        "Our head of engineering just resigned and took two senior developers "
        "with him to a competitor",
        "Challenge", "Shocked", "low", (87, 93),
        "Critical talent departure affecting team stability",
    ),
    _record(
        "REGULATORY_ISSUE_001",
        "Compliance audit revealed several issues that need immediate attention "
        "or we risk losing our operating license",
        "Challenge", "Anxious", "medium", (85, 91),
        "Regulatory compliance threats to business operations",
    ),
    # Growth
    _record(
        "FUNDING_SUCCESS_001",
        "Just closed our Series B round - $15M from top-tier VCs who really "
        "believe in our vision",
        "Growth", "Elated", "high", (92, 97),
        "Major funding milestone enabling significant expansion",
    ),
    _record(
        "MARKET_EXPANSION_001",
        "Signed our first enterprise client in Europe - this opens up an "
        "entirely new market for us",
        "Growth", "Thrilled", "high", (89, 95),
        "International expansion and enterprise market entry",
    ),
    _record(
        "VIRAL_GROWTH_001",
        "Our latest feature went viral on social media - user signups increased "
        "by 400% in just three days",
        "Growth", "Amazed", "high", (90, 96),
        "Unexpected viral marketing success driving rapid user acquisition",
    ),
    _record(
        "PARTNERSHIP_WIN_001",
        "Microsoft wants to integrate our solution into their platform - this "
        "could be game-changing for distribution",
        "Growth", "Excited", "high", (88, 94),
        "Strategic partnership with major tech company",
    ),
    # Achievements
    _record(
        "IPO_MILESTONE_001",
        "Board approved moving forward with IPO preparations - we've come so far "
        "from the garage startup days",
        "Achievement", "Proud", "high", (90, 95),
        "Major corporate milestone and exit strategy advancement",
    ),
    _record(
        "INDUSTRY_AWARD_001",
        "Won Innovation of the Year at the industry conference - finally getting "
        "recognition for our groundbreaking work",
        "Achievement", "Accomplished", "high", (87, 93),
        "Industry recognition and competitive differentiation",
    ),
    _record(
        "PATENT_APPROVAL_001",
        "Our core technology patent was approved after two years - this gives us "
        "real competitive protection",
        "Achievement", "Relieved", "medium", (85, 91),
        "Intellectual property protection and competitive moats",
    ),
    _record(
        "CERTIFICATION_SUCCESS_001",
        "Passed SOC 2 compliance audit on first attempt - months of preparation "
        "finally paid off",
        "Achievement", "Accomplished", "medium", (83, 89),
        "Operational excellence and enterprise readiness",
    ),
    # Planning
    _record(
        "STRATEGIC_PLANNING_001",
        "Spent the weekend creating our 3-year strategic plan and mapping out key "
        "initiatives for each quarter",
        "Planning", "Focused", "medium", (80, 87),
        "Long-term strategic vision and operational roadmap",
    ),
    _record(
        "BUDGET_PLANNING_001",
        "Working through next year's budget allocations and deciding where to "
        "invest for maximum growth impact",
        "Planning", "Analytical", "medium", (78, 85),
        "Financial planning and resource optimization",
    ),
    _record(
        "HIRING_STRATEGY_001",
        "Designing our talent acquisition strategy for scaling from 20 to 100 "
        "employees over the next 18 months",
        "Planning", "Strategic", "medium", (79, 86),
        "Workforce planning and organizational scaling",
    ),
    _record(
        "PRODUCT_ROADMAP_001",
        "Finalizing our product roadmap based on customer feedback and "
        "competitive analysis from the past quarter",
        "Planning", "Methodical", "medium", (81, 88),
        "Product strategy and development prioritization",
    ),
    # Research
    _record(
        "COMPETITIVE_ANALYSIS_001",
        "Deep diving into what our competitors are doing and identifying gaps we "
        "can exploit in the market",
        "Research", "Curious", "medium", (80, 87),
        "Market intelligence and competitive positioning",
    ),
    _record(
        "CUSTOMER_RESEARCH_001",
        "Conducted 15 customer interviews this week to understand why some users "
        "aren't converting to paid plans",
        "Research", "Investigative", "medium", (82, 89),
        "Customer behavior analysis and conversion optimization",
    ),
    _record(
        "MARKET_SIZING_001",
        "Analyzing TAM and SAM data to validate our expansion strategy into "
        "adjacent market segments",
        "Research", "Analytical", "medium", (78, 85),
        "Market opportunity assessment and growth strategy validation",
    ),
    _record(
        "USER_TESTING_001",
        "Running A/B tests on our new onboarding flow to improve user activation rates",
        "Research", "Experimental", "medium", (79, 86),
        "Product optimization and user experience improvement",
    ),
    # Learning
    _record(
        "LEARNING_CONFERENCE_001",
        "Attending TechCrunch Disrupt this week to learn about emerging trends and "
        "network with other founders",
        "Learning", "Curious", "medium", (75, 83),
        "Industry learning and professional networking",
    ),
    _record(
        "SKILL_DEVELOPMENT_001",
        "Taking an executive coaching course to improve my leadership skills as "
        "we scale the team",
        "Learning", "Thoughtful", "medium", (74, 82),
        "Leadership development and personal growth",
    ),
    _record(
        "MENTOR_SESSION_001",
        "Had a breakthrough conversation with my mentor about scaling challenges "
        "and building sustainable systems",
        "Learning", "Enlightened", "medium", (76, 84),
        "Mentorship and strategic guidance",
    ),
    _record(
        "BOOK_INSIGHTS_001",
        "Reading 'Blitzscaling' and getting valuable insights about when and how "
        "to prioritize growth over efficiency",
        "Learning", "Inspired", "medium", (73, 81),
        "Business education and strategic learning",
    ),
    _record(
        "PLANNING_001",
        "Working on our strategic roadmap for next quarter and evaluating "
        "different growth opportunities",
        "Planning", "thoughtful", "medium", (75, 85),
        "Strategic planning and opportunity assessment",
    ),
    _record(
        "LEARNING_001",
        "Discovered some valuable insights from customer interviews that will "
        "shape our product development",
        "Learning", "curious", "medium", (80, 90),
        "Customer research and product insights",
    ),
]


def load_default_corpus() -> list[TrainingExample]:
    """Build TrainingExample objects for the bundled corpus."""
    return [TrainingExample.from_dict(record) for record in BUSINESS_JOURNAL_TRAINING_DATA]
