"""Fixed questionnaire vocabulary: departments, policy areas and answer options."""

# Reserved option meaning "explain in the paired *Other text field"
OTHERS = "Others"
OTHERS_SPECIFY = "Others (Specify)"

DEPARTMENTS = (
    "Head of Department (HODs)",
    "Technical Team",
    "Data Annotation Team",
    "Digital Marketing Department",
    "HR & Administration Department",
    "Finance & Accounting Department",
    "Project Management Department",
    "Sanitation Department",
    "Security Department",
)

# Expected headcount loaded by scripts/seed_data.py
DEFAULT_DEPARTMENT_COUNTS = {
    "Head of Department (HODs)": 7,
    "Technical Team": 54,
    "Data Annotation Team": 70,
    "Digital Marketing Department": 5,
    "HR & Administration Department": 3,
    "Finance & Accounting Department": 1,
    "Project Management Department": 1,
    "Sanitation Department": 2,
    "Security Department": 4,
}

# Section B rating keys, in questionnaire order
AWARENESS_AREAS = (
    "antiSocialBehavior",
    "antiDiscrimination",
    "sexualHarassment",
    "safeguarding",
    "hrPolicyManual",
    "codeOfConduct",
    "financeWellness",
    "workLifeBalance",
    "digitalWorkplace",
    "softSkills",
    "professionalism",
)

URGENT_TRAININGS = (
    "Anti-Social Behavior Policy",
    "Anti-Discrimination Policy",
    "Sexual Harassment Prevention",
    "Safeguarding Policy",
    "HR Policy Manual",
    "Code of Conduct",
    "Finance & Financial Wellness",
    "Work-Life Balance & Mental Health Awareness",
    "Digital Workplace & Skills",
    "Soft Skills",
    OTHERS,
)

FINANCE_WELLNESS_NEEDS = (
    "Financial Literacy Basics – Saving, spending, and tracking money smartly",
    "Digital Finance Tools – Mobile banking, and expense tracking",
    "Investment & Savings Options – youth-friendly investment paths like SACCOs, money markets, and digital assets",
    "Debt Management – responsible use of loans, credit, and avoiding financial stress",
)

CULTURE_WELLNESS_NEEDS = (
    "Stress management strategies for high-paced digital environments",
    "Recognizing burnout and early warning signs",
    "Accessing mental health resources and support",
    "Avoiding digital fatigue and information overload (Healthy Tech Use)",
    "Self-awareness and emotional regulation",
    "Understanding others' perspectives (empathy)",
    "Using emotional intelligence for leadership and teamwork",
    "Resilience & Adaptability Training",
    "Wellness & Lifestyle Management",
    "Diversity, Equity & Inclusion (DEI) Awareness",
    OTHERS,
)

DIGITAL_SKILLS_NEEDS = (
    "Cybersecurity Awareness",
    "Responsible AI & Ethical Tech Use",
    "Data Privacy & Compliance",
    OTHERS,
)

PROFESSIONAL_DEV_NEEDS = (
    "Effective Communication",
    "Leadership Skills for Young Professionals",
    "Entrepreneurial Mindset & Intrapreneurship",
    "Personal Branding & Professional Networking",
    "Teamwork & Conflict Resolution",
    "Time Management & Productivity Tools",
    OTHERS,
)

CONFIDENCE_LEVELS = (
    "Not confident at all",
    "Slightly confident",
    "Neutral",
    "Confident",
    "Very confident",
)

HIGH_CONFIDENCE_LEVELS = ("Confident", "Very confident")

OBSERVED_ISSUES = (
    "Anti-social behavior (e.g., verbal abuse, public disorder)",
    "Discrimination (e.g., gender, race, disability bias)",
    "Harassment (verbal, physical, sexual, cyber)",
    "Lack of safeguarding for vulnerable persons (Women, PWDs, Senior Citizens)",
    "None of the above",
    OTHERS,
)

REPORTING_CHANNEL_ANSWERS = ("Yes", "No", "Not sure")

TRAINING_METHODS = (
    "In-person training sessions",
    "Self-paced e-learning modules",
    "Shared Policy handbooks",
    OTHERS,
)

REFRESHER_FREQUENCIES = (
    "1 training /Week",
    "1 training /Monthly",
    "2 trainings /Month",
)

PRIORITIZED_POLICIES = (
    "Anti-Social Behavior Policy",
    "Anti-Discrimination Policy",
    "Sexual and Other forms of harassment Policy",
    "Safeguarding Policy",
    "HR Policy Manual",
    "Code of Conduct",
    "Finance & Financial Wellness Policy",
    "Work-Life Balance & Mental Health Policy",
    "Digital Workplace & Skills Policy",
    "Soft Skills Development Policy",
)

POLICY_CHALLENGES = (
    "Policies are too complex or difficult to understand",
    "Lack of clear examples or case studies",
    "Insufficient training on policy implementation",
    "Policies are not easily accessible or well-organized",
    "Conflicting information between different policies",
    "Language barriers or technical jargon",
    "Lack of regular updates or communication about policy changes",
    "Unclear consequences or enforcement procedures",
    "Limited time to read and understand all policies",
    OTHERS_SPECIFY,
)

# selection field -> (sentinel values, paired free-text field)
OTHER_TEXT_PAIRS = {
    "urgent_trainings": ((OTHERS,), "urgent_trainings_other"),
    "culture_wellness_needs": ((OTHERS,), "culture_wellness_other"),
    "digital_skills_needs": ((OTHERS,), "digital_skills_other"),
    "professional_dev_needs": ((OTHERS,), "professional_dev_other"),
    "observed_issues": ((OTHERS,), "observed_issues_other"),
    "policy_challenges": ((OTHERS_SPECIFY,), "policy_challenges_other"),
}
