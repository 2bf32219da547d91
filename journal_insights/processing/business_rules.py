"""High-precision business pattern rules.

Each rule ANDs two or more word-boundary term groups and may carry exclusion
groups that veto it. Rules are evaluated by descending priority and only the
first match counts, so narrow rules sit above broad ones.
"""

from ..models.classification import Category, Energy, MoodPolarity
from ..models.rule import Rule, term_group

_CHALLENGE = Category.CHALLENGE
_GROWTH = Category.GROWTH
_ACHIEVEMENT = Category.ACHIEVEMENT
_PLANNING = Category.PLANNING
_RESEARCH = Category.RESEARCH
_LEARNING = Category.LEARNING

_POSITIVE = MoodPolarity.POSITIVE
_NEGATIVE = MoodPolarity.NEGATIVE
_NEUTRAL = MoodPolarity.NEUTRAL

_PLANNING_LANGUAGE = term_group(
    "plan", "planning", "strategy", "strategic", "roadmap", "analyzing",
    "considering", "preparing",
)

BUSINESS_RULES: list[Rule] = [
    # Challenges
    Rule(
        id="SUPPLY_CHAIN_DISRUPTION",
        priority=100,
        category=_CHALLENGE,
        required=(
            term_group("suppliers?", "shipments?", "deliver(?:y|ies)", "raw materials?",
                       "supply chain", "procurement"),
            term_group("delay(?:ed|s)?", "risk", "behind", "problems?", "shortages?"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEGATIVE,
        confidence_boost=20,
        description="Supplier or shipment delays putting operations at risk",
    ),
    Rule(
        id="REVENUE_MILESTONE",
        priority=98,
        category=_GROWTH,
        required=(
            term_group("new accounts?", "new (?:customers|clients)", "recurring revenue",
                       "revenue", "sales", "mrr", "arr", "bookings"),
            term_group("all-time high", "record(?: high| month| quarter| year)?",
                       "milestones?", "highest", "new high"),
        ),
        excluded=(
            term_group("closed down", "shut down", "closing", "dropped", "fell",
                       "declin(?:e|ed|ing)", "lost", "loss(?:es)?", "missed", "low"),
        ),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=22,
        description="New accounts or recurring revenue reaching a high",
    ),
    Rule(
        id="RESEARCH_PUBLICATION",
        priority=96,
        category=_ACHIEVEMENT,
        required=(
            term_group("published", "research paper", "whitepaper"),
            term_group("finally", "hard work", "paid off", "completed"),
        ),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=20,
        description="Publishing research after sustained effort",
    ),
    Rule(
        id="CASH_FLOW_CRISIS",
        priority=94,
        category=_CHALLENGE,
        required=(
            term_group(r"cash\s*flow", "payroll", "credit limit", "working capital"),
            term_group("tight", "struggling", "crisis", "danger(?:ous|ously)?",
                       "problems?", "delay"),
        ),
        energy=Energy.LOW,
        mood_polarity=_NEGATIVE,
        confidence_boost=18,
        description="Cash flow or payroll pressure",
    ),
    Rule(
        id="CUSTOMER_CHURN",
        priority=92,
        category=_CHALLENGE,
        required=(
            term_group("clients?", "customers?"),
            term_group("cancel(?:l?ed)?", "left", "churn(?:ed)?", "lost", "terminated"),
        ),
        energy=Energy.LOW,
        mood_polarity=_NEGATIVE,
        confidence_boost=16,
        description="Customers cancelling or leaving",
    ),
    Rule(
        id="TECHNICAL_OUTAGE",
        priority=90,
        category=_CHALLENGE,
        required=(
            term_group("outage", "crash(?:ed)?", "servers?", "platform", "website"),
            term_group("down", "hours?", "failed", "lost"),
        ),
        excluded=(
            term_group(r"costs?(?: are| were)? down", r"acquisition costs?",
                       r"expenses?(?: are| were)? down"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEGATIVE,
        confidence_boost=15,
        description="Platform outages with business impact",
    ),
    Rule(
        id="TALENT_LOSS",
        priority=88,
        category=_CHALLENGE,
        required=(
            term_group("resign(?:ed)?", "quit", "left", "departure"),
            term_group("engineer(?:s|ing)?", "developers?", "employees?", "talent"),
        ),
        energy=Energy.LOW,
        mood_polarity=_NEGATIVE,
        confidence_boost=14,
        description="Key people leaving the company",
    ),
    Rule(
        id="COMPLIANCE_RISK",
        priority=86,
        category=_CHALLENGE,
        required=(
            term_group("compliance", "audit", "regulatory", "license"),
            term_group("issues?", "problems?", "risk", "violations?"),
        ),
        excluded=(term_group("passed"),),
        energy=Energy.MEDIUM,
        mood_polarity=_NEGATIVE,
        confidence_boost=13,
        description="Regulatory findings threatening operations",
    ),
    # Growth
    Rule(
        id="FUNDING_SUCCESS",
        priority=84,
        category=_GROWTH,
        required=(
            term_group("funding", "investment", "series [a-e]", "round"),
            term_group("closed", "raised", "secured", "million"),
        ),
        excluded=(_PLANNING_LANGUAGE,),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=20,
        description="Closing a funding round",
    ),
    Rule(
        id="MARKET_EXPANSION",
        priority=83,
        category=_GROWTH,
        required=(
            term_group("expansion", "market", "international", "enterprise", "partnership"),
            term_group("new", "first", "signed", "entered", "launched", "acquired"),
        ),
        excluded=(_PLANNING_LANGUAGE,),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=16,
        description="Entering a new market or landing enterprise customers",
    ),
    Rule(
        id="MAJOR_CLIENT_WIN",
        priority=82,
        category=_ACHIEVEMENT,
        required=(
            term_group("client", "deal", "contract"),
            term_group("signed", "closed", "biggest", "huge"),
        ),
        excluded=(term_group("cancel(?:l?ed)?", "lost", "terminated"),),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=20,
        description="Landing a major client or contract",
    ),
    Rule(
        id="VIRAL_GROWTH",
        priority=80,
        category=_GROWTH,
        required=(
            term_group("viral", "signups", "users", "growth"),
            term_group("increased", "doubled", "tripled", "exploded"),
        ),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=17,
        description="Sudden user growth",
    ),
    Rule(
        id="HIRING_COMPLETED",
        priority=78,
        category=_GROWTH,
        required=(
            term_group("hired", "onboarded", "welcomed"),
            term_group("new", "joined", "started", "three", "two"),
        ),
        excluded=(_PLANNING_LANGUAGE,),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=14,
        description="New people joining the team",
    ),
    # Achievements
    Rule(
        id="IPO_MILESTONE",
        priority=76,
        category=_ACHIEVEMENT,
        required=(
            term_group("ipo", "public offering"),
            term_group("approved", "preparations", "milestone"),
        ),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=20,
        description="Progress towards going public",
    ),
    Rule(
        id="INDUSTRY_RECOGNITION",
        priority=74,
        category=_ACHIEVEMENT,
        required=(
            term_group("award", "recognition", "innovation", "patent"),
            term_group("won", "approved", "granted"),
        ),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=18,
        description="Awards, patents and industry recognition",
    ),
    Rule(
        id="PRODUCT_LAUNCH",
        priority=72,
        category=_ACHIEVEMENT,
        required=(
            term_group("launch(?:ed)?", "release(?:d)?", "shipped"),
            term_group("success(?:ful|fully)?", "positive", "overwhelming(?:ly)?"),
        ),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=16,
        description="A launch that landed well",
    ),
    Rule(
        id="CERTIFICATION_SUCCESS",
        priority=70,
        category=_ACHIEVEMENT,
        required=(
            term_group("certification", "compliance", "audit", "soc"),
            term_group("passed", "approved", "certified"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_POSITIVE,
        confidence_boost=14,
        description="Passing an audit or certification",
    ),
    Rule(
        id="TECHNICAL_BREAKTHROUGH",
        priority=68,
        category=_ACHIEVEMENT,
        required=(
            term_group("algorithm", "model", "performance"),
            term_group("faster", "cracked", "optimi[sz]ed", "optimi[sz]ation"),
        ),
        energy=Energy.HIGH,
        mood_polarity=_POSITIVE,
        confidence_boost=19,
        description="Technical breakthroughs",
    ),
    # Planning
    Rule(
        id="STRATEGIC_PLANNING",
        priority=60,
        category=_PLANNING,
        required=(
            term_group("strategic", "strategy", "plan", "roadmap"),
            term_group("year", "quarter(?:ly)?", "mapping", "creating", "next", "finali[sz]ing"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=12,
        description="Strategic plans and roadmaps",
    ),
    Rule(
        id="BUDGET_PLANNING",
        priority=58,
        category=_PLANNING,
        required=(
            term_group("budget", "allocations?"),
            term_group("planning", "next", "year", "invest"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=11,
        description="Budget and allocation planning",
    ),
    Rule(
        id="HIRING_STRATEGY",
        priority=56,
        category=_PLANNING,
        required=(
            term_group("hiring", "talent acquisition", "scaling"),
            term_group("strategy", "plan", "employees"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=10,
        description="Workforce planning",
    ),
    # Research
    Rule(
        id="COMPETITIVE_ANALYSIS",
        priority=50,
        category=_RESEARCH,
        required=(
            term_group("competitors?", "competitive"),
            term_group("gaps?", "exploit", "position(?:ing)?", "analysis"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=12,
        description="Studying competitors",
    ),
    Rule(
        id="CUSTOMER_RESEARCH",
        priority=48,
        category=_RESEARCH,
        required=(
            term_group("interviews?", "surveys?", "research"),
            term_group("understand", "behavior", "convert(?:ing)?"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=11,
        description="Interviewing and surveying customers",
    ),
    Rule(
        id="EXPERIMENTATION",
        priority=46,
        category=_RESEARCH,
        required=(
            term_group("a/b", "tests?", "testing", "experiments?"),
            term_group("onboarding", "conversion", "activation"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=10,
        description="Product experiments",
    ),
    # Learning
    Rule(
        id="CONFERENCE_LEARNING",
        priority=40,
        category=_LEARNING,
        required=(
            term_group("conference", "summit", "workshop", "disrupt"),
            term_group("learn(?:ing)?", "trends", "network"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=9,
        description="Learning at events",
    ),
    Rule(
        id="SKILL_DEVELOPMENT",
        priority=38,
        category=_LEARNING,
        required=(
            term_group("coaching", "course", "mentor", "book"),
            term_group("improve", "skills", "leadership", "insights"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=8,
        description="Courses, coaching and reading",
    ),
    Rule(
        id="CUSTOMER_INSIGHTS",
        priority=36,
        category=_LEARNING,
        required=(
            term_group("insights?", "learned", "discovered", "lessons?"),
            term_group("customers?", "feedback", "interviews?", "mistakes?"),
        ),
        energy=Energy.MEDIUM,
        mood_polarity=_NEUTRAL,
        confidence_boost=10,
        description="Lessons drawn from customers or mistakes",
    ),
]
