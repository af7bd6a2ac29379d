import os

# --- Runtime settings ------------------------------------------------------------------------------

APP_TITLE = "GenAI Privacy & Compliance Assessment"

LOG_LEVEL = os.getenv("ASSESSMENT_LOG_LEVEL", "INFO").upper()
DEBUG = os.getenv("ASSESSMENT_DEBUG", "0").lower() in ("1", "true", "yes")
HOST = os.getenv("ASSESSMENT_HOST", "127.0.0.1")
PORT = int(os.getenv("ASSESSMENT_PORT", "8050"))

# Number of recommendations surfaced on the results screen and in exports.
RECOMMENDATION_LIMIT = 3

# --- Configuration --------------------------------------------------------------------------------

CATEGORIES = [
    {
        "id": "discovery",
        "name": "Discovery & Inventory",
        "description": "Understanding your GenAI landscape, data sources, and model purposes.",
        "color": "#f7b96e",
    },
    {
        "id": "regulation",
        "name": "Regulation & Classification",
        "description": "Navigating EU AI Act applicability, risk classification, and obligations.",
        "color": "#7192bf",
    },
    {
        "id": "impact",
        "name": "Impact Assessment & Mitigation",
        "description": "Assessing fundamental rights impact, bias, and societal effects.",
        "color": "#2a4eb4",
    },
    {
        "id": "governance",
        "name": "Governance & Operations",
        "description": "Establishing policies, roles, QMS, and incident response for GenAI.",
        "color": "#b07da1",
    },
    {
        "id": "data",
        "name": "Data",
        "description": "Data governance, privacy and security",
        "color": "#b07da1",
    },
    {
        "id": "security",
        "name": "Security",
        "description": "Cybersecurity and model robustness",
        "color": "#f7b96e",
    },
    {
        "id": "ethics",
        "name": "Ethics",
        "description": "Ethical considerations and human oversight",
        "color": "#7192bf",
    },
    {
        "id": "capability",
        "name": "Capability & Readiness",
        "description": "Organisational readiness, skills, and technical documentation.",
        "color": "#2a4eb4",
    },
]

# "Global" shows every question; no selection (None) shows only untagged ones.
SHOW_ALL_REGION = "Global"

REGIONS = [
    {"id": "USA", "name": "United States"},
    {"id": "EU", "name": "European Union"},
    {"id": "UK", "name": "United Kingdom"},
    {"id": SHOW_ALL_REGION, "name": "Other / Global (Show all questions)"},
]

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

# Ascending thresholds; the first tier must start at 0.
MATURITY_LEVELS = [
    {
        "name": "Initial",
        "min_score": 0,
        "color": "#ef4444",
        "description": "Basic AI security policies may be emerging, but significant gaps exist. "
        "Your organisation should focus on establishing foundational controls and awareness.",
    },
    {
        "name": "Developing",
        "min_score": 21,
        "color": "#f59e0b",
        "description": "Basic AI security policies are in place, but significant gaps remain. "
        "Your organisation should focus on formalising processes and expanding controls.",
    },
    {
        "name": "Defined",
        "min_score": 41,
        "color": "#eab308",
        "description": "AI security processes are formally defined and documented. "
        "Consistent implementation across projects is the next key area of focus.",
    },
    {
        "name": "Managed",
        "min_score": 61,
        "color": "#0ea5e9",
        "description": "AI security is actively managed with quantitative insights. "
        "Proactive measures are in place, and continuous improvement is a goal.",
    },
    {
        "name": "Optimising",
        "min_score": 81,
        "color": "#22c55e",
        "description": "AI security practices are mature and continuously optimised using "
        "data-driven insights and predictive analytics. You are a leader in AI security.",
    },
]

RECOMMENDATIONS = [
    {
        "id": "REC_DATA_GOVERNANCE",
        "title": "Strengthen Data Governance & Privacy Frameworks",
        "description": "Your responses indicate potential gaps in data handling and privacy "
        "policies for AI systems. A data governance programme establishes robust frameworks, "
        "ensuring compliance with regulations like GDPR and CCPA and managing the data "
        "lifecycle for AI.",
        "link": "https://www.devsecai.io/services/data-governance",
        "priority": "high",
        "category": "discovery",
    },
    {
        "id": "REC_MODEL_SECURITY",
        "title": "Enhance AI Model Security & Integrity",
        "description": "Concerns regarding AI model security, including vulnerability to "
        "adversarial attacks or lack of integrity checks, were noted. Model security "
        "assessments and hardening protect your AI assets.",
        "link": "https://www.devsecai.io/services/model-security",
        "priority": "high",
        "category": "security",
    },
    {
        "id": "REC_AI_RED_TEAMING",
        "title": "Proactive AI System Security Testing (Red Teaming)",
        "description": "Identify and mitigate vulnerabilities in your AI systems before "
        "attackers do. AI red teaming simulates real-world attacks and provides actionable "
        "insights to enhance your AI defences.",
        "link": "https://www.devsecai.io/services/ai-red-teaming",
        "priority": "high",
        "category": "security",
    },
    {
        "id": "REC_COMPLIANCE_AUTOMATION",
        "title": "Automate & Streamline Compliance Monitoring",
        "description": "Manual compliance tracking for AI can be error-prone and inefficient. "
        "Compliance automation implements continuous monitoring and reporting for your AI "
        "systems, reducing overhead and ensuring ongoing adherence.",
        "link": "https://www.devsecai.io/services/compliance-automation",
        "priority": "medium",
        "category": "governance",
    },
    {
        "id": "REC_EU_AI_ACT_PREP",
        "title": "Prepare for EU AI Act Obligations",
        "description": "Your responses suggest a need to formalise your approach to the EU AI "
        "Act, including risk classification, conformity assessments, and technical "
        "documentation.",
        "link": "https://www.devsecai.io/services/eu-ai-act-readiness",
        "priority": "high",
        "category": "regulation",
    },
    {
        "id": "REC_FRIA_IMPLEMENTATION",
        "title": "Implement Fundamental Rights Impact Assessments (FRIA)",
        "description": "Assessing the impact of AI systems on fundamental rights is crucial, "
        "especially under the EU AI Act. A thorough FRIA identifies potential harms and the "
        "mitigation strategies needed for responsible AI deployment.",
        "link": "https://www.devsecai.io/services/fria-assessment",
        "priority": "high",
        "category": "impact",
    },
    {
        "id": "REC_DATA_PROTECTION_ENHANCEMENT",
        "title": "Enhance Data Protection & Privacy Practices",
        "description": "Ensuring robust data protection for personal data used in AI systems "
        "is critical (e.g., GDPR, HIPAA). Implement data minimisation, purpose limitation, "
        "and security measures for AI data, and establish DPAs.",
        "link": "https://www.devsecai.io/services/data-protection",
        "priority": "high",
        "category": "data",
    },
    {
        "id": "REC_ETHICAL_AI_FRAMEWORK",
        "title": "Establish an Ethical AI Framework & Oversight",
        "description": "Beyond compliance, clear ethical guidelines and human oversight for "
        "AI development and deployment foster trust and responsible innovation.",
        "link": "https://www.devsecai.io/services/ethical-ai-framework",
        "priority": "medium",
        "category": "ethics",
    },
    {
        "id": "REC_AI_READINESS_CAPABILITY",
        "title": "Bolster AI Capability & Technical Readiness",
        "description": "Comprehensive technical documentation and organisational readiness "
        "are key for managing AI systems effectively and meeting regulatory demands "
        "(e.g., EU AI Act).",
        "link": "https://www.devsecai.io/services/ai-capability-building",
        "priority": "medium",
        "category": "capability",
    },
]

# Options run from most mature (index 0) to least mature (last). Questions with a
# "recommendation" but no "trigger_values" trigger on their last option.
QUESTIONS = [
    {
        "id": "genAiInventory",
        "text": "Are all GenAI models and systems (in use or development) inventorised?",
        "options": ["Yes, fully", "Partially", "No, in progress", "No, not started"],
        "info": "A full inventory is key to understanding scope and potential risks.",
        "category": "discovery",
        "priority": "high",
        "recommendation": "REC_DATA_GOVERNANCE",
        "trigger_values": ["Partially", "No, in progress", "No, not started"],
    },
    {
        "id": "dataSourcesGenAi",
        "text": "Are data sources (training, fine-tuning, RAG) for GenAI models documented and assessed for bias or quality?",
        "options": ["Yes, fully documented & assessed", "Partially documented/assessed", "Documented, not assessed", "No"],
        "info": "Data lineage and quality understanding is key under the EU AI Act.",
        "category": "discovery",
        "priority": "high",
        "recommendation": "REC_DATA_GOVERNANCE",
        "trigger_values": ["Partially documented/assessed", "Documented, not assessed", "No"],
    },
    {
        "id": "modelPurposeGenAi",
        "text": "Is each GenAI system's purpose and operational context clearly defined and documented?",
        "options": ["Yes, for all systems", "For most systems", "For some systems", "No"],
        "info": "Defining the purpose helps in risk classification and conformity assessment.",
        "category": "discovery",
        "priority": "medium",
        "recommendation": "REC_DATA_GOVERNANCE",
        "trigger_values": ["For some systems", "No"],
    },
    {
        "id": "thirdPartyGenAi",
        "text": "If using third-party GenAI models/APIs (e.g., LLMs), are their compliance and risk profiles understood?",
        "options": ["Yes, fully understood", "Yes, partially understood", "Yes, but not understood", "No third-party models used"],
        "info": "Third-party component responsibilities must be clear.",
        "category": "discovery",
        "priority": "high",
        "recommendation": "REC_MODEL_SECURITY",
        "trigger_values": ["Yes, partially understood", "Yes, but not understood"],
    },
    {
        "id": "systemBoundariesGenAi",
        "text": "Are system boundaries and integration points for GenAI applications with other enterprise systems defined?",
        "options": ["Yes, clearly defined", "Partially defined", "In progress", "No"],
        "info": "Clear boundaries are vital for security and impact assessment.",
        "category": "discovery",
        "priority": "medium",
    },
    {
        "id": "euAiActApplicability",
        "text": "Do your GenAI systems fall under the EU AI Act's scope?",
        "options": ["Yes, determined", "No, assessment pending", "Unsure", "Not applicable (outside EU market/impact)"],
        "info": "The EU AI Act applies to providers, deployers, importers, and distributors of AI systems in the EU.",
        "category": "regulation",
        "priority": "high",
        "regions": ["EU"],
        "recommendation": "REC_COMPLIANCE_AUTOMATION",
        "trigger_values": ["No, assessment pending", "Unsure"],
    },
    {
        "id": "riskClassificationEuAIA",
        "text": "Are your GenAI systems classified by EU AI Act risk categories (unacceptable, high, limited, minimal)?",
        "options": ["Yes, all classified", "Partially classified", "Classification in progress", "No"],
        "info": "Risk classification dictates obligation levels.",
        "category": "regulation",
        "priority": "high",
    },
    {
        "id": "highRiskObligationsGenAi",
        "text": "If GenAI systems are high-risk, are you prepared for EU AI Act obligations (e.g., QMS, technical documentation, conformity assessment)?",
        "options": ["Yes, fully prepared", "Partially prepared", "Aware, not yet prepared", "Not applicable / No high-risk systems"],
        "info": "High-risk AI systems face stringent requirements.",
        "category": "regulation",
        "priority": "high",
    },
    {
        "id": "gpAiModelObligations",
        "text": "If developing/using GPAI models, are you aware of specific EU AI Act obligations (e.g., transparency, technical documentation)?",
        "options": ["Yes, fully aware and prepared", "Aware, partially prepared", "Unaware of specific obligations", "Not applicable"],
        "info": "GPAI models, particularly systemic ones, have dedicated rules.",
        "category": "regulation",
        "priority": "high",
    },
    {
        "id": "conformityAssessmentEuAIA",
        "text": "For high-risk GenAI systems, is there a plan for conformity assessment before market placement or use?",
        "options": ["Yes, plan in place", "Planning in progress", "No plan yet", "Not applicable"],
        "info": "Conformity assessment shows EU AI Act compliance.",
        "category": "regulation",
        "priority": "medium",
    },
    {
        "id": "fundamentalRightsImpactGenAi",
        "text": "Has a Fundamental Rights Impact Assessment (FRIA) been conducted for GenAI systems, particularly if high-risk?",
        "options": ["Yes, FRIA conducted", "FRIA in progress", "Planned, not started", "No / Not applicable"],
        "info": "The EU AI Act emphasises fundamental rights protection.",
        "category": "impact",
        "priority": "high",
    },
    {
        "id": "biasDetectionMitigationGenAi",
        "text": "Are processes in place to detect, document, and mitigate biases in GenAI models and their outputs?",
        "options": ["Yes, robust processes", "Processes in development", "Aware, no formal process", "No"],
        "info": "Addressing bias is vital for fairness and non-discrimination.",
        "category": "impact",
        "priority": "high",
    },
    {
        "id": "societalImpactGenAi",
        "text": "Have potential societal impacts (e.g., employment, public discourse, environment) of GenAI systems been assessed?",
        "options": ["Yes, comprehensive assessment", "Partial assessment", "Aware, not formally assessed", "No"],
        "info": "Consider broader societal impacts beyond direct user harm.",
        "category": "impact",
        "priority": "medium",
    },
    {
        "id": "misusePotentialGenAi",
        "text": "Has the potential for misuse or malicious use of GenAI systems (e.g., deepfakes, disinformation) been assessed and documented?",
        "options": ["Yes, assessed & documented", "Assessed, not documented", "Partially assessed", "No"],
        "info": "Understanding misuse potential is key for risk management.",
        "category": "impact",
        "priority": "high",
    },
    {
        "id": "environmentalImpactGenAi",
        "text": "Has the environmental impact (e.g., energy use for training/inference) of GenAI models been considered or assessed?",
        "options": ["Yes, assessed & documented", "Considered, not formally assessed", "Aware, no action taken", "No"],
        "info": "Sustainability is an increasing concern for large AI models.",
        "category": "impact",
        "priority": "low",
    },
    {
        "id": "genAiPolicyFramework",
        "text": "Has your organization established a formal, documented policy framework specifically addressing the governance of GenAI development, deployment, and use, including acceptable use, data handling, and ethical considerations?",
        "options": ["Yes, comprehensive & documented", "Policy in development", "Informal guidelines exist", "No specific GenAI policy"],
        "info": "A clear GenAI policy framework is crucial for consistent, responsible, and compliant use across the organization.",
        "category": "governance",
        "priority": "high",
    },
    {
        "id": "genAiRolesAccountability",
        "text": "Are there clearly defined roles, responsibilities, and accountability structures for the oversight and governance of GenAI systems, including a designated individual or body responsible for GenAI compliance?",
        "options": ["Yes, clearly defined & assigned", "Partially defined or assigned", "Responsibilities being defined", "No defined roles/accountability"],
        "info": "Clear accountability ensures that GenAI governance is effectively managed and enforced.",
        "category": "governance",
        "priority": "high",
    },
    {
        "id": "genAiLegalReviewProcess",
        "text": "Is there a formal process to regularly review and ensure that GenAI systems and their use comply with applicable local laws, regulations (e.g., data privacy, IP, consumer protection), and contractual obligations?",
        "options": ["Yes, formal & regular review process", "Ad-hoc review process", "Process being developed", "No formal review process"],
        "info": "Ongoing legal and regulatory review is essential to maintain compliance in the evolving GenAI landscape.",
        "category": "governance",
        "priority": "high",
    },
    {
        "id": "genAiIncidentResponsePlan",
        "text": "Does your organization have an incident response plan specifically addressing potential breaches, misuse, or failures related to GenAI systems, including notification procedures and mitigation strategies?",
        "options": ["Yes, specific GenAI plan in place", "General IT incident plan adapted for AI", "Plan in development", "No specific AI incident plan"],
        "info": "GenAI incidents (e.g., data leakage via LLM, generation of harmful content) may require specialized response procedures beyond standard IT incidents.",
        "category": "governance",
        "priority": "medium",
    },
    {
        "id": "genAiQMS",
        "text": "Has a Quality Management System (QMS) or equivalent set of processes been established or adapted to oversee the lifecycle of GenAI models, including development, testing, validation, and monitoring for performance and compliance?",
        "options": ["Yes, comprehensive QMS for GenAI", "QMS partially adapted/implemented", "QMS principles being considered", "No specific QMS for GenAI"],
        "info": "A QMS helps ensure GenAI systems are developed and operate reliably, ethically, and in compliance with standards.",
        "category": "governance",
        "priority": "medium",
    },
    {
        "id": "genAiEmployeeTrainingGovernance",
        "text": "Are employees who develop, deploy, or use GenAI systems provided with regular training on relevant policies, ethical guidelines, legal obligations, and potential risks associated with GenAI?",
        "options": ["Yes, regular & comprehensive training", "Ad-hoc or initial training only", "Training program in development", "No formal training provided"],
        "info": "Educated employees are key to mitigating risks and ensuring responsible GenAI adoption.",
        "category": "governance",
        "priority": "medium",
    },
    {
        "id": "gdprComplianceGenAi",
        "text": "Do GenAI systems processing personal data comply with GDPR principles (e.g., lawfulness, fairness, transparency, data minimisation)?",
        "options": ["Yes, fully compliant", "Partially compliant", "Compliance efforts ongoing", "Not applicable / No personal data"],
        "info": "GDPR applies to AI systems processing EU residents' personal data.",
        "category": "data",
        "priority": "high",
        "regions": ["EU", "UK"],
    },
    {
        "id": "dataProcessingAgreementsGenAi",
        "text": "Are Data Processing Agreements (DPAs) in place with third-party GenAI providers/users involving personal data?",
        "options": ["Yes, for all relevant parties", "For some parties", "No DPAs in place", "Not applicable"],
        "info": "DPAs are mandatory under GDPR for controller-processor relations.",
        "category": "data",
        "priority": "high",
    },
    {
        "id": "hipaaComplianceGenAi",
        "text": "For GenAI in healthcare, are they HIPAA compliant regarding Protected Health Information (PHI)?",
        "options": ["Yes, fully compliant", "Partially compliant", "Compliance efforts ongoing", "Not applicable"],
        "info": "HIPAA sets standards for protecting sensitive patient health information.",
        "category": "data",
        "priority": "high",
        "regions": ["USA"],
    },
    {
        "id": "syntheticDataGenAi",
        "text": "If using synthetic data for GenAI, has its quality, representativeness, and re-identification risks been assessed?",
        "options": ["Yes, thoroughly assessed", "Partially assessed", "Aware of risks, not assessed", "Not using synthetic data"],
        "info": "Synthetic data has its own privacy and quality challenges.",
        "category": "data",
        "priority": "medium",
    },
    {
        "id": "dataSubjectRightsGenAi",
        "text": "Are mechanisms in place for data subject rights (e.g., access, rectification, erasure) for personal data used/generated by GenAI systems?",
        "options": ["Yes, robust mechanisms", "Mechanisms in development", "Limited/manual mechanisms", "No / Not applicable"],
        "info": "GenAI systems must respect GDPR data subject rights.",
        "category": "data",
        "priority": "high",
    },
    {
        "id": "adversarialAttackDefenseGenAi",
        "text": "Are defences implemented against common adversarial attacks on GenAI models (e.g., data poisoning, model evasion, prompt injection)?",
        "options": ["Yes, comprehensive defences", "Some defences implemented", "Aware, planning defences", "No specific defences"],
        "info": "GenAI models are vulnerable to unique security threats.",
        "category": "security",
        "priority": "high",
    },
    {
        "id": "dataSecurityTrainingGenAi",
        "text": "Is data for training, fine-tuning, and inference of GenAI models secured against unauthorised access, leakage, or corruption?",
        "options": ["Yes, strong security", "Moderate security", "Basic security", "Security unclear/lacking"],
        "info": "Protecting data throughout the AI lifecycle is critical.",
        "category": "security",
        "priority": "high",
    },
    {
        "id": "modelSecurityGenAi",
        "text": "Are your GenAI models (weights, architecture) protected against theft or unauthorised modification?",
        "options": ["Yes, strong protection", "Moderate protection", "Basic protection", "Protection unclear/lacking"],
        "info": "AI models are valuable IP and security assets.",
        "category": "security",
        "priority": "medium",
    },
    {
        "id": "accessControlsGenAi",
        "text": "Are robust access controls and authentication for users and systems interacting with GenAI applications in place?",
        "options": ["Yes, robust controls", "Standard controls", "Limited controls", "No specific access controls"],
        "info": "Ensuring only authorised access to GenAI capabilities.",
        "category": "security",
        "priority": "high",
    },
    {
        "id": "incidentResponseGenAi",
        "text": "Is there an incident response plan specifically addressing security breaches or failures related to GenAI systems?",
        "options": ["Yes, specific plan", "General IT incident plan covers AI", "No specific AI incident plan", "No incident plan"],
        "info": "GenAI incidents may require specialised response procedures.",
        "category": "security",
        "priority": "medium",
    },
    {
        "id": "ethicalGuidelinesGenAi",
        "text": "Have ethical guidelines for GenAI development and deployment been established or adopted?",
        "options": ["Yes, comprehensive guidelines", "Guidelines in development", "Considering guidelines", "No formal guidelines"],
        "info": "Ethical principles guide responsible AI beyond legal compliance.",
        "category": "ethics",
        "priority": "high",
    },
    {
        "id": "fairnessMetricsGenAi",
        "text": "Are GenAI systems monitored for fairness using defined metrics, with identified disparities addressed?",
        "options": ["Yes, continuous monitoring & mitigation", "Periodic monitoring", "Aware, no active monitoring", "No"],
        "info": "Fairness requires ongoing effort and measurement.",
        "category": "ethics",
        "priority": "high",
    },
    {
        "id": "humanOversightEthicsGenAi",
        "text": "Is there a clear process for human oversight and intervention in GenAI decisions/content, especially in sensitive contexts?",
        "options": ["Yes, well-defined process", "Process exists, ad-hoc", "Limited human oversight", "No structured human oversight"],
        "info": "EU AI Act mandates human oversight for high-risk systems.",
        "category": "ethics",
        "priority": "high",
    },
    {
        "id": "stakeholderEngagementEthicsGenAi",
        "text": "Do you engage diverse stakeholders (including affected communities) on ethical implications of GenAI systems?",
        "options": ["Yes, regular engagement", "Occasional engagement", "Limited/no engagement", "Not applicable"],
        "info": "Involving stakeholders can uncover unforeseen ethical issues.",
        "category": "ethics",
        "priority": "medium",
    },
    {
        "id": "accountabilityMechanismsEthicsGenAi",
        "text": "Are clear accountability mechanisms in place for outcomes and decisions by or assisted by GenAI systems?",
        "options": ["Yes, clear mechanisms", "Mechanisms developing", "Limited accountability", "No"],
        "info": "Knowing who is responsible when AI systems err is vital.",
        "category": "ethics",
        "priority": "high",
    },
    {
        "id": "transparencyGenAiOutput",
        "text": "Is it clearly disclosed to users when they interact with GenAI systems or consume AI-generated content (e.g., deepfakes, text)?",
        "options": ["Yes, always disclosed", "Disclosed most cases", "Partially/inconsistently disclosed", "No disclosure"],
        "info": "Transparency is a key EU AI Act requirement for certain AI systems.",
        "category": "capability",
        "priority": "high",
    },
    {
        "id": "explainabilityGenAi",
        "text": "Can GenAI systems provide context-appropriate explanations or justifications for their outputs/decisions?",
        "options": ["Yes, satisfactory degree", "Limited explainability", "Explainability research goal", "No explainability features"],
        "info": "Though challenging for GenAI, some explainability is often desired/required.",
        "category": "capability",
        "priority": "medium",
    },
    {
        "id": "userControlGenAi",
        "text": "Do users have appropriate control over GenAI system operation and outputs (e.g., stop, correct, override)?",
        "options": ["Yes, sufficient control", "Some control", "Limited control", "No direct control"],
        "info": "Empowering users with control enhances trust and safety.",
        "category": "capability",
        "priority": "medium",
    },
    {
        "id": "robustnessReliabilityGenAi",
        "text": "Are GenAI systems tested for robustness and reliability under various conditions (including edge cases, unexpected inputs)?",
        "options": ["Yes, extensively tested", "Moderately tested", "Basic testing", "Limited/no specific testing"],
        "info": "High-risk AI systems must be robust and reliable.",
        "category": "capability",
        "priority": "high",
    },
    {
        "id": "technicalDocumentationGenAi",
        "text": "Is comprehensive technical documentation maintained for your GenAI systems, as required by the EU AI Act for high-risk systems?",
        "options": ["Yes, up-to-date and comprehensive", "Documentation in progress", "Basic documentation exists", "No formal technical documentation"],
        "info": "Technical documentation is essential for conformity assessment and transparency.",
        "category": "capability",
        "priority": "high",
    },
]

NEXT_STEPS = [
    "Schedule a comprehensive review of your AI systems",
    "Develop a compliance roadmap based on this assessment",
    "Establish documentation procedures for high-priority areas",
    "Review and update risk management processes",
    "Consider expert consultation for complex compliance requirements",
]

CONSULT_URL = "https://www.devsecai.io/contact-us"
