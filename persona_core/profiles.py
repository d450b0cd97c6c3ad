# persona_core/profiles.py
"""Static report table: one authoritative narrative per type code.

`static_report` is the synchronous, total resolution path. Codes missing
from the table get a template report built from the code's letters, so it
never raises for a well-formed code.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from .cognitive import derive_stack, summarize
from .typecode import decompose
from .types import (
    CareerVector,
    LifeInsightDetail,
    LifeInsights,
    LifestyleVector,
    PsychologyDeepDive,
    Report,
)

log = logging.getLogger(__name__)


def _d(summary: str, strengths: List[str], challenges: List[str], tip: str) -> LifeInsightDetail:
    return LifeInsightDetail(summary=summary, strengths=tuple(strengths), challenges=tuple(challenges), actionable_tip=tip)


# --- narrative content, grouped by temperament ---

_CONTENT: Dict[str, Dict[str, Any]] = {
    # Analysts (NT)
    "INTJ": {
        "type_name": "Architect (Introverted, Intuitive, Thinking, Judging)",
        "summary": "Strategic planners who pair a long-range vision with an exacting, systematic approach to problems.",
        "strengths": ["Strategic Vision", "Independence", "Logical Precision", "Determination"],
        "weaknesses": ["Arrogance", "Dismissiveness of Emotion", "Over-critical", "Social Distance"],
        "psychology": PsychologyDeepDive(
            subconscious="A forecasting engine that quietly plays out many possible futures before committing to one.",
            paradox="An idealist at heart who presents as a hard-nosed realist.",
            motivations=["Mastery", "Coherent Systems", "Efficiency"],
            fears=["Incompetence", "Emotional Entanglement", "Chaos"]),
        "career": CareerVector(title="Systems Strategist", description="Designing how organisations and ideas evolve over years, not weeks.",
                               roles=["Chief Executive", "Solutions Architect", "Policy Analyst"]),
        "lifestyle": LifestyleVector(hobbies=["Chess", "Independent Research", "Solo Travel"],
                                     environment="A minimal, carefully ordered space.", stress_relief="Reorganising information and hard physical exercise."),
        "work": _d("A self-directed contributor who prizes competence over politics.", ["Long-term Planning", "Efficiency"], ["Delegation", "Diplomacy"],
                   "Treat relationships with colleagues as a strategic asset worth investing in."),
        "friendships": _d("A few deep friendships built on mutual intellectual respect.", ["Loyalty", "Candour"], ["Emotional Support", "Availability"],
                          "Look for the reasoning behind other people's feelings instead of dismissing them."),
        "relationships": _d("A committed partner who wants both people to keep growing.", ["Stability", "Commitment"], ["Vulnerability", "Small Talk"],
                            "Set a regular time to talk about feelings before they pile up."),
        "stress": _d("Under heavy stress the inferior Extraverted Sensing takes over: overindulgence, compulsive tidying or reckless physical risk.",
                     ["Sudden Focus"], ["Impulsivity"], "Get outside; concrete physical surroundings settle an overworked mind."),
        "growth": "Developing Introverted Feeling (Fi) gives your plans a personal purpose beyond efficiency.",
        "unhealthy": "Withdrawing into cynicism and treating everyone else as intellectually beneath them.",
    },
    "INTP": {
        "type_name": "Logician (Introverted, Intuitive, Thinking, Perceiving)",
        "summary": "Inventive theorists who want to understand the principles underneath every system they meet.",
        "strengths": ["Originality", "Abstract Reasoning", "Intellectual Honesty", "Open-mindedness"],
        "weaknesses": ["Absent-mindedness", "Insensitivity", "Procrastination", "Self-doubt"],
        "psychology": PsychologyDeepDive(
            subconscious="A running loop of 'why' and 'how' that never settles for the received answer.",
            paradox="Seeks objective truth yet keeps doubting every conclusion it reaches.",
            motivations=["Consistency", "Understanding", "Autonomy"],
            fears=["Looking Foolish", "Emotional Scenes", "Conformity"]),
        "career": CareerVector(title="Theoretical Innovator", description="Solving problems other people have not noticed yet.",
                               roles=["Research Scientist", "Software Engineer", "Philosopher"]),
        "lifestyle": LifestyleVector(hobbies=["Programming", "Strategy Games", "Long Reads"],
                                     environment="Cluttered to others, perfectly navigable to them.", stress_relief="Losing themselves in an unrelated puzzle."),
        "work": _d("The idea generator who thrives in research and early design.", ["Objectivity", "Creativity"], ["Routine", "Follow-through"],
                   "Pair with someone who enjoys execution to turn theories into results."),
        "friendships": _d("Easy-going friends who love following a conversation wherever it leads.", ["Acceptance", "Insight"], ["Reliability", "Social Cues"],
                          "A short 'thinking of you' message is part of keeping a friendship running."),
        "relationships": _d("Honest and independent partners who need room to think.", ["Integrity", "Calm"], ["Showing Affection", "Restlessness"],
                            "Say your appreciation out loud rather than assuming it is obvious."),
        "stress": _d("Under heavy stress the inferior Extraverted Feeling surfaces as hypersensitivity to criticism and social anxiety.",
                     ["Emotional Release"], ["Loss of Composure"], "Treat the emotion as information instead of an error to suppress."),
        "growth": "Leaning on Extraverted Intuition (Ne) helps test your models against the outside world.",
        "unhealthy": "Using logic as a weapon to keep people at arm's length.",
    },
    "ENTJ": {
        "type_name": "Commander (Extraverted, Intuitive, Thinking, Judging)",
        "summary": "Decisive leaders who see openings where others see obstacles and organise people to take them.",
        "strengths": ["Willpower", "Efficiency", "Strategic Thinking", "Confidence"],
        "weaknesses": ["Stubbornness", "Impatience", "Coldness", "Dominance"],
        "psychology": PsychologyDeepDive(
            subconscious="A drive to arrange the world into high-performing structures.",
            paradox="Values power, yet respects most the people who push back.",
            motivations=["Influence", "Legacy", "Achievement"],
            fears=["Inefficiency", "Losing Control", "Dependence"]),
        "career": CareerVector(title="Organisational Architect", description="Building teams and ventures that scale.",
                               roles=["Chief Executive", "Venture Investor", "Operations Director"]),
        "lifestyle": LifestyleVector(hobbies=["Competitive Sport", "Investing", "Skill Mastery"],
                                     environment="Sleek, professional and built for output.", stress_relief="Intense training or a competitive match."),
        "work": _d("Natural leaders who do well when the stakes are high.", ["Decision Making", "Setting Standards"], ["Empathy", "Taking Input"],
                   "Ask how people feel about a plan before asking how they will deliver it."),
        "friendships": _d("Friends who push each other toward their goals.", ["Encouragement", "Challenge"], ["Dominance", "Gentleness"],
                          "Not every meeting has to be productive; enjoy the slow moments."),
        "relationships": _d("Growth-oriented partners who treat the relationship as a shared project.", ["Reliability", "Ambition"], ["Softness", "Sharing Control"],
                            "Letting go of control in small ways builds trust."),
        "stress": _d("Under heavy stress the inferior Introverted Feeling turns them brooding and unusually sensitive to their own failures.",
                     ["Hidden Depth"], ["Self-reproach"], "Journal to translate muddled feelings into something you can reason about."),
        "growth": "Cultivating auxiliary Introverted Intuition (Ni) shows the human consequences of a decision further out.",
        "unhealthy": "Running over anyone in the way of a goal they no longer care about.",
    },
    "ENTP": {
        "type_name": "Debater (Extraverted, Intuitive, Thinking, Perceiving)",
        "summary": "Quick, curious challengers who take ideas apart to see whether they can be rebuilt better.",
        "strengths": ["Inventiveness", "Breadth of Knowledge", "Quick Wit", "Charisma"],
        "weaknesses": ["Argumentativeness", "Insensitivity", "Dislike of Routine", "Boredom"],
        "psychology": PsychologyDeepDive(
            subconscious="A sandbox where ideas are thrown together to see which survive.",
            paradox="Argues to find the truth yet often looks as if they do not care what it is.",
            motivations=["Novelty", "Debate", "Possibility"],
            fears=["Stagnation", "Being Wrong Unknowingly", "Losing Freedom"]),
        "career": CareerVector(title="Creative Disruptor", description="Questioning the status quo to find a better path.",
                               roles=["Founder", "Inventor", "Creative Director"]),
        "lifestyle": LifestyleVector(hobbies=["Debating", "Side Projects", "Travel"],
                                     environment="Busy and full of half-finished ideas.", stress_relief="A lively argument with a worthy opponent."),
        "work": _d("Strong at the visionary phase of a project, weaker at maintenance.", ["Pivoting", "Innovation"], ["Follow-through", "Details"],
                   "Hand off finishing work so you can move to the next hard problem."),
        "friendships": _d("The friend with endless 'what if' questions.", ["Entertainment", "Stimulation"], ["Contrarianism", "Reliability"],
                          "Sometimes 'I hear you' is a better reply than a counter-argument."),
        "relationships": _d("Lively partners who want an intellectual equal.", ["Spontaneity", "Encouragement"], ["Emotional Follow-up", "Consistency"],
                            "Consistency with chores and plans is a form of respect."),
        "stress": _d("Under heavy stress the inferior Introverted Sensing shows up as fixation on small bodily symptoms or past details.",
                     ["Detail Clean-up"], ["Worry"], "Build one small daily routine; repetition steadies you."),
        "growth": "Developing tertiary Extraverted Feeling (Fe) makes your ideas far more persuasive.",
        "unhealthy": "Manipulating people and systems just to watch them break.",
    },
    # Diplomats (NF)
    "INFJ": {
        "type_name": "Advocate (Introverted, Intuitive, Feeling, Judging)",
        "summary": "Quiet idealists with a clear sense of purpose and a talent for understanding people.",
        "strengths": ["Insight", "Principle", "Compassion", "Determination"],
        "weaknesses": ["Perfectionism", "Burnout", "Privacy to a Fault", "Sensitivity to Conflict"],
        "psychology": PsychologyDeepDive(
            subconscious="A pattern-reader that senses where people and events are heading.",
            paradox="Deeply connected to others yet rarely feels fully understood.",
            motivations=["Meaning", "Helping Others", "Integrity"],
            fears=["Being Misunderstood", "Losing Purpose", "Betrayal"]),
        "career": CareerVector(title="Purpose-driven Counsellor", description="Guiding people and causes toward a better version of themselves.",
                               roles=["Counsellor", "Writer", "Non-profit Director"]),
        "lifestyle": LifestyleVector(hobbies=["Writing", "Reading", "Quiet Walks"],
                                     environment="A calm, meaningful space with few distractions.", stress_relief="Solitude and reflective writing."),
        "work": _d("Mission-led contributors who need their work to matter.", ["Vision", "Dedication"], ["Saying No", "Conflict"],
                   "Protect your energy by setting clear limits on what you take on."),
        "friendships": _d("A small circle of deep, trusting friendships.", ["Understanding", "Loyalty"], ["Opening Up", "Overgiving"],
                          "Let friends support you as much as you support them."),
        "relationships": _d("Devoted partners seeking a deep, authentic bond.", ["Devotion", "Empathy"], ["Idealisation", "Withdrawing"],
                            "Share unmet needs early rather than hoping they are noticed."),
        "stress": _d("Under heavy stress the inferior Extraverted Sensing drives overindulgence or obsessive focus on the surroundings.",
                     ["Grounding"], ["Excess"], "Slow sensory activities such as cooking or gardening bring you back."),
        "growth": "Using auxiliary Extraverted Feeling (Fe) openly lets others see and share your vision.",
        "unhealthy": "Cutting people off without explanation once they fail an unspoken test.",
    },
    "INFP": {
        "type_name": "Mediator (Introverted, Intuitive, Feeling, Perceiving)",
        "summary": "Idealistic, imaginative people guided by deeply held values and a wish to make things better.",
        "strengths": ["Empathy", "Creativity", "Open-mindedness", "Idealism"],
        "weaknesses": ["Impracticality", "Self-criticism", "Withdrawal", "Taking Things Personally"],
        "psychology": PsychologyDeepDive(
            subconscious="A rich inner world where values are weighed against every experience.",
            paradox="Gentle on the surface and unbending about their core principles.",
            motivations=["Authenticity", "Harmony", "Self-expression"],
            fears=["Losing Identity", "Conflict", "Meaninglessness"]),
        "career": CareerVector(title="Values-driven Creator", description="Giving shape to ideas that help people feel understood.",
                               roles=["Author", "Therapist", "Designer"]),
        "lifestyle": LifestyleVector(hobbies=["Creative Writing", "Music", "Nature"],
                                     environment="Personal and cosy, full of meaningful objects.", stress_relief="Time alone with art, music or nature."),
        "work": _d("Creative contributors who flourish in work aligned with their values.", ["Originality", "Empathy"], ["Deadlines", "Criticism"],
                   "Break long projects into small milestones you can finish."),
        "friendships": _d("Warm, accepting friends who value depth over number.", ["Acceptance", "Listening"], ["Initiating", "Conflict"],
                          "Reach out first; people often want to hear from you."),
        "relationships": _d("Romantic partners who look for a soul-level connection.", ["Devotion", "Understanding"], ["Idealisation", "Expressing Anger"],
                            "Name small frustrations before they become big ones."),
        "stress": _d("Under heavy stress the inferior Extraverted Thinking comes out as harsh criticism and rigid fixing.",
                     ["Decisiveness"], ["Harshness"], "Write down the facts of the situation before acting on them."),
        "growth": "Developing Extraverted Intuition (Ne) turns private ideals into practical options.",
        "unhealthy": "Retreating into fantasy and resentment when the world falls short of their ideals.",
    },
    "ENFJ": {
        "type_name": "Protagonist (Extraverted, Intuitive, Feeling, Judging)",
        "summary": "Charismatic mentors who bring people together around a shared purpose.",
        "strengths": ["Charisma", "Reliability", "Altruism", "Natural Leadership"],
        "weaknesses": ["Overinvolvement", "Approval-seeking", "Idealism", "Self-neglect"],
        "psychology": PsychologyDeepDive(
            subconscious="A social radar tuned to what each person in the room needs.",
            paradox="Devoted to others yet unsure who they are without someone to help.",
            motivations=["Connection", "Growth of Others", "Harmony"],
            fears=["Rejection", "Selfishness", "Disharmony"]),
        "career": CareerVector(title="Community Catalyst", description="Developing people and rallying them toward a goal.",
                               roles=["Teacher", "Human Resources Lead", "Coach"]),
        "lifestyle": LifestyleVector(hobbies=["Hosting", "Volunteering", "Group Fitness"],
                                     environment="Welcoming and ready for guests.", stress_relief="Talking things through with a trusted friend."),
        "work": _d("Inspiring leaders who get the best out of a team.", ["Motivation", "Communication"], ["Objectivity", "Delegating Hard Calls"],
                   "Base tough decisions on criteria agreed in advance."),
        "friendships": _d("Generous organisers who keep groups together.", ["Warmth", "Support"], ["Over-helping", "Boundaries"],
                          "Let friends solve their own problems sometimes."),
        "relationships": _d("Attentive partners who invest heavily in the relationship.", ["Commitment", "Affection"], ["Self-neglect", "Control"],
                            "Ask for what you need as readily as you offer help."),
        "stress": _d("Under heavy stress the inferior Introverted Thinking shows up as cold, nitpicking self-analysis.",
                     ["Clarity"], ["Self-criticism"], "Step back and review the situation with one neutral friend."),
        "growth": "Leaning on auxiliary Introverted Intuition (Ni) keeps your leadership anchored to a long-term vision.",
        "unhealthy": "Manipulating people for what they believe is their own good.",
    },
    "ENFP": {
        "type_name": "Campaigner (Extraverted, Intuitive, Feeling, Perceiving)",
        "summary": "Enthusiastic free spirits who see possibility in people and ideas everywhere.",
        "strengths": ["Curiosity", "Enthusiasm", "Communication", "Empathy"],
        "weaknesses": ["Disorganisation", "Overthinking", "Restlessness", "People-pleasing"],
        "psychology": PsychologyDeepDive(
            subconscious="A web of connections between people, ideas and what might be.",
            paradox="Light and playful on the outside, intensely serious about their values.",
            motivations=["Freedom", "Inspiration", "Authentic Connection"],
            fears=["Being Trapped", "Routine", "Being Ordinary"]),
        "career": CareerVector(title="Inspiration Engine", description="Starting things and getting people excited about them.",
                               roles=["Journalist", "Marketing Strategist", "Entrepreneur"]),
        "lifestyle": LifestyleVector(hobbies=["Travel", "Improv", "Learning New Things"],
                                     environment="Colourful and full of projects.", stress_relief="A spontaneous adventure with friends."),
        "work": _d("Idea-rich starters who light up brainstorming sessions.", ["Creativity", "Networking"], ["Finishing", "Admin"],
                   "Pick one idea per quarter to see through to the end."),
        "friendships": _d("Affectionate friends with wide and varied circles.", ["Fun", "Encouragement"], ["Consistency", "Overcommitting"],
                          "Keep fewer promises and keep all of them."),
        "relationships": _d("Passionate partners who keep the relationship fresh.", ["Warmth", "Playfulness"], ["Boredom", "Avoiding Conflict"],
                            "Treat routine moments as part of the romance, not the end of it."),
        "stress": _d("Under heavy stress the inferior Introverted Sensing pulls them into fixation on small details and past mistakes.",
                     ["Attention to Detail"], ["Rumination"], "Restore a simple daily structure until the pressure passes."),
        "growth": "Strengthening auxiliary Introverted Feeling (Fi) helps choose which possibilities truly matter.",
        "unhealthy": "Chasing novelty and approval while abandoning commitments.",
    },
    # Sentinels (SJ)
    "ISTJ": {
        "type_name": "Logistician (Introverted, Sensing, Thinking, Judging)",
        "summary": "Dependable, practical people who keep things running through diligence and clear standards.",
        "strengths": ["Reliability", "Thoroughness", "Honesty", "Responsibility"],
        "weaknesses": ["Rigidity", "Stubbornness", "Judgement", "Reluctance to Change"],
        "psychology": PsychologyDeepDive(
            subconscious="A detailed archive of what has worked before and why.",
            paradox="Seen as unemotional, yet fiercely devoted to the people they serve.",
            motivations=["Duty", "Order", "Trustworthiness"],
            fears=["Chaos", "Irresponsibility", "Unknown Outcomes"]),
        "career": CareerVector(title="Operations Guardian", description="Making sure systems run correctly every single time.",
                               roles=["Auditor", "Logistics Manager", "Engineer"]),
        "lifestyle": LifestyleVector(hobbies=["Woodworking", "History", "Collecting"],
                                     environment="Orderly, with everything in its place.", stress_relief="Quiet time working through a checklist."),
        "work": _d("The steady backbone of any team.", ["Consistency", "Accuracy"], ["Adapting", "Ambiguity"],
                   "Try one new method per project in a low-risk area."),
        "friendships": _d("Loyal friends who show care through practical help.", ["Dependability", "Honesty"], ["Spontaneity", "Expressing Feelings"],
                          "Tell friends what they mean to you, not only show it."),
        "relationships": _d("Committed partners who value stability.", ["Loyalty", "Responsibility"], ["Emotional Expression", "Flexibility"],
                            "Surprise your partner once in a while; it matters more than you expect."),
        "stress": _d("Under heavy stress the inferior Extraverted Intuition spins catastrophic what-if scenarios.",
                     ["Imagination"], ["Catastrophising"], "Write down the worst case and the realistic case side by side."),
        "growth": "Using auxiliary Extraverted Thinking (Te) to share your plans makes you easier to work with.",
        "unhealthy": "Enforcing rules for their own sake and refusing any exception.",
    },
    "ISFJ": {
        "type_name": "Defender (Introverted, Sensing, Feeling, Judging)",
        "summary": "Warm, dedicated protectors who remember the details that make people feel cared for.",
        "strengths": ["Supportiveness", "Reliability", "Patience", "Observation"],
        "weaknesses": ["Overwork", "Shyness", "Reluctance to Change", "Taking Things Personally"],
        "psychology": PsychologyDeepDive(
            subconscious="A memory for every kindness and every person's preferences.",
            paradox="Quietly strong while seldom asking for anything in return.",
            motivations=["Security", "Helping Others", "Tradition"],
            fears=["Letting People Down", "Conflict", "Instability"]),
        "career": CareerVector(title="Caretaker of Systems", description="Keeping people safe and services dependable.",
                               roles=["Nurse", "Office Manager", "Teacher"]),
        "lifestyle": LifestyleVector(hobbies=["Baking", "Gardening", "Family Traditions"],
                                     environment="Comfortable, tidy and homely.", stress_relief="Familiar routines and time with close family."),
        "work": _d("Conscientious supporters who make sure nothing falls through the cracks.", ["Diligence", "Service"], ["Self-advocacy", "Change"],
                   "Make your contributions visible; mention them in reviews."),
        "friendships": _d("Thoughtful friends who never forget a birthday.", ["Care", "Loyalty"], ["Saying No", "Resentment"],
                          "Decline requests that overload you; good friends will understand."),
        "relationships": _d("Nurturing partners who build a secure home.", ["Devotion", "Attentiveness"], ["Voicing Needs", "Change"],
                            "State your own needs plainly instead of hinting."),
        "stress": _d("Under heavy stress the inferior Extraverted Intuition brings anxious, gloomy predictions.",
                     ["Foresight"], ["Worry"], "Return to what is known and in front of you today."),
        "growth": "Using auxiliary Extraverted Feeling (Fe) to state your own needs keeps care flowing both ways.",
        "unhealthy": "Martyrdom, quietly keeping score of every unreturned favour.",
    },
    "ESTJ": {
        "type_name": "Executive (Extraverted, Sensing, Thinking, Judging)",
        "summary": "Organised administrators who bring order, clear rules and follow-through.",
        "strengths": ["Organisation", "Dedication", "Directness", "Decisiveness"],
        "weaknesses": ["Inflexibility", "Bluntness", "Judgement", "Difficulty Relaxing"],
        "psychology": PsychologyDeepDive(
            subconscious="A running checklist of what needs to happen and who should do it.",
            paradox="Firm in public, sentimental about family and tradition in private.",
            motivations=["Order", "Responsibility", "Results"],
            fears=["Incompetence", "Disorder", "Being Taken Advantage Of"]),
        "career": CareerVector(title="Operational Leader", description="Running teams and processes that deliver predictably.",
                               roles=["Project Manager", "Judge", "Operations Executive"]),
        "lifestyle": LifestyleVector(hobbies=["Team Sports", "Home Improvement", "Community Leadership"],
                                     environment="Efficient and well-maintained.", stress_relief="Completing a concrete task from start to finish."),
        "work": _d("Effective managers who set standards and meet them.", ["Planning", "Accountability"], ["Flexibility", "Listening"],
                   "Invite dissent before finalising a plan."),
        "friendships": _d("Dependable organisers of group plans.", ["Loyalty", "Reliability"], ["Softness", "Patience"],
                          "Let friends choose the plan sometimes."),
        "relationships": _d("Steady partners who show love through commitment.", ["Stability", "Honesty"], ["Emotional Nuance", "Compromise"],
                            "Listen fully before offering a solution."),
        "stress": _d("Under heavy stress the inferior Introverted Feeling surfaces as feeling unappreciated and misunderstood.",
                     ["Self-awareness"], ["Hurt Feelings"], "Acknowledge the feeling to someone you trust instead of working harder."),
        "growth": "Leaning on auxiliary Introverted Sensing (Si) for context keeps decisions grounded in experience.",
        "unhealthy": "Controlling everyone around them and punishing deviation.",
    },
    "ESFJ": {
        "type_name": "Consul (Extraverted, Sensing, Feeling, Judging)",
        "summary": "Caring, sociable people who keep communities running and make everyone feel included.",
        "strengths": ["Warmth", "Loyalty", "Practicality", "Sense of Duty"],
        "weaknesses": ["Need for Approval", "Inflexibility", "Sensitivity to Criticism", "Over-involvement"],
        "psychology": PsychologyDeepDive(
            subconscious="A social map of who needs what and how everyone is doing.",
            paradox="Confident hosts who are privately anxious about being liked.",
            motivations=["Belonging", "Harmony", "Service"],
            fears=["Rejection", "Conflict", "Being Unappreciated"]),
        "career": CareerVector(title="Community Organiser", description="Bringing people together and looking after them.",
                               roles=["Event Planner", "Healthcare Administrator", "Sales Lead"]),
        "lifestyle": LifestyleVector(hobbies=["Hosting Dinners", "Volunteering", "Family Events"],
                                     environment="Inviting and full of people.", stress_relief="Helping someone with something concrete."),
        "work": _d("Team players who create a supportive atmosphere.", ["Cooperation", "Organisation"], ["Criticism", "Ambiguity"],
                   "Ask for feedback on the work itself, separately from the relationship."),
        "friendships": _d("The friend who remembers everyone and keeps in touch.", ["Generosity", "Reliability"], ["Gossip", "Approval"],
                          "Spend time with people who challenge you as well as those who agree."),
        "relationships": _d("Devoted partners who express love in practical ways.", ["Attentiveness", "Loyalty"], ["Jealousy", "Need for Reassurance"],
                            "Trust the relationship without asking it to prove itself."),
        "stress": _d("Under heavy stress the inferior Introverted Thinking turns them hypercritical and doubtful of their own competence.",
                     ["Analytical Moments"], ["Self-doubt"], "Check your conclusions against the facts with a neutral friend."),
        "growth": "Using auxiliary Introverted Sensing (Si) with an open mind keeps tradition from becoming rigidity.",
        "unhealthy": "Using guilt and social pressure to keep others in line.",
    },
    # Explorers (SP)
    "ISTP": {
        "type_name": "Virtuoso (Introverted, Sensing, Thinking, Perceiving)",
        "summary": "Calm, hands-on problem solvers who learn how things work by taking them apart.",
        "strengths": ["Practicality", "Composure", "Resourcefulness", "Adaptability"],
        "weaknesses": ["Detachment", "Risk-taking", "Private to a Fault", "Low Tolerance for Commitment"],
        "psychology": PsychologyDeepDive(
            subconscious="An internal model of how every mechanism fits together.",
            paradox="Cool and detached, yet capable of sudden intense passion.",
            motivations=["Freedom", "Competence", "Action"],
            fears=["Being Controlled", "Emotional Demands", "Boredom"]),
        "career": CareerVector(title="Technical Troubleshooter", description="Fixing what others cannot, under pressure.",
                               roles=["Mechanic", "Pilot", "Forensic Analyst"]),
        "lifestyle": LifestyleVector(hobbies=["Motorbikes", "Climbing", "Building Things"],
                                     environment="A functional workshop with the right tools.", stress_relief="Physical activity that demands full attention."),
        "work": _d("Crisis responders who stay cool when things break.", ["Troubleshooting", "Efficiency"], ["Long-term Planning", "Meetings"],
                   "Write down your fixes so others can learn from them."),
        "friendships": _d("Low-drama friends who bond over shared activities.", ["Easygoing", "Loyalty"], ["Emotional Talk", "Keeping in Touch"],
                          "Check in occasionally, even without an activity planned."),
        "relationships": _d("Independent partners who show love through action.", ["Calm", "Practical Help"], ["Verbal Affection", "Planning Ahead"],
                            "Put feelings into words now and then; actions do not always translate."),
        "stress": _d("Under heavy stress the inferior Extraverted Feeling produces emotional outbursts and fear of being disliked.",
                     ["Emotional Awareness"], ["Overreaction"], "Take space to cool down, then talk it through once."),
        "growth": "Leaning on auxiliary Extraverted Sensing (Se) with patience helps turn skill into mastery.",
        "unhealthy": "Reckless thrill-seeking and disregard for others' feelings.",
    },
    "ISFP": {
        "type_name": "Adventurer (Introverted, Sensing, Feeling, Perceiving)",
        "summary": "Gentle, artistic people who live in the moment and express themselves through what they make.",
        "strengths": ["Aesthetic Sense", "Kindness", "Flexibility", "Authenticity"],
        "weaknesses": ["Unpredictability", "Conflict Avoidance", "Self-doubt", "Difficulty Planning"],
        "psychology": PsychologyDeepDive(
            subconscious="A sensory palette tuned to beauty and personal meaning.",
            paradox="Quiet and modest, yet driven to stand out through their art.",
            motivations=["Self-expression", "Freedom", "Harmony"],
            fears=["Criticism", "Being Confined", "Losing Authenticity"]),
        "career": CareerVector(title="Sensory Artisan", description="Creating experiences and objects people can feel.",
                               roles=["Designer", "Photographer", "Veterinarian"]),
        "lifestyle": LifestyleVector(hobbies=["Painting", "Hiking", "Music"],
                                     environment="Beautiful, personal and close to nature.", stress_relief="Making something with their hands."),
        "work": _d("Creative contributors who need freedom in how they work.", ["Craft", "Empathy"], ["Deadlines", "Self-promotion"],
                   "Share work in progress early to get support sooner."),
        "friendships": _d("Kind, accepting friends who show up when it counts.", ["Acceptance", "Warmth"], ["Initiating", "Conflict"],
                          "Tell friends when something bothers you rather than withdrawing."),
        "relationships": _d("Affectionate partners who express love through gestures.", ["Tenderness", "Presence"], ["Long-term Planning", "Conflict"],
                            "Talk about the future together even if it feels abstract."),
        "stress": _d("Under heavy stress the inferior Extraverted Thinking makes them harshly critical and rigid.",
                     ["Decisiveness"], ["Harshness"], "Pause before acting; return to what you value."),
        "growth": "Using auxiliary Extraverted Sensing (Se) to act on your values helps ideals become real.",
        "unhealthy": "Escaping into pleasure and isolation when life feels out of control.",
    },
    "ESTP": {
        "type_name": "Entrepreneur (Extraverted, Sensing, Thinking, Perceiving)",
        "summary": "Energetic, perceptive people who enjoy living on the edge and solving problems in real time.",
        "strengths": ["Boldness", "Practicality", "Perception", "Sociability"],
        "weaknesses": ["Impatience", "Risk-taking", "Insensitivity", "Disregard for Rules"],
        "psychology": PsychologyDeepDive(
            subconscious="A live feed of opportunities in the immediate environment.",
            paradox="Seems impulsive, yet reads situations with striking accuracy.",
            motivations=["Action", "Winning", "Experience"],
            fears=["Boredom", "Being Trapped", "Missing Out"]),
        "career": CareerVector(title="Tactical Operator", description="Closing deals and handling crises as they happen.",
                               roles=["Sales Director", "Paramedic", "Entrepreneur"]),
        "lifestyle": LifestyleVector(hobbies=["Extreme Sports", "Social Events", "Gaming"],
                                     environment="Lively and always changing.", stress_relief="High-energy physical activity."),
        "work": _d("The fixer who thrives in fast-moving situations.", ["Problem Solving", "Persuasion"], ["Follow-through", "Rules"],
                   "Patience is a tactic too; practise using it."),
        "friendships": _d("The fun friend who is always up for a plan.", ["Fun", "Directness"], ["Depth", "Reliability"],
                          "Sometimes people need your presence more than your jokes."),
        "relationships": _d("Exciting, physical partners who love shared activity.", ["Passion", "Presence"], ["Commitment", "Emotional Talk"],
                            "Let yourself be vulnerable now and then; it is a worthwhile risk."),
        "stress": _d("Under heavy stress the inferior Introverted Intuition turns them suspicious about hidden meanings and the future.",
                     ["Sudden Intuition"], ["Paranoia"], "Stick to the facts in front of you."),
        "growth": "Developing auxiliary Introverted Thinking (Ti) slows you down enough to make better bets.",
        "unhealthy": "Using charm and perception purely for personal gain.",
    },
    "ESFP": {
        "type_name": "Entertainer (Extraverted, Sensing, Feeling, Perceiving)",
        "summary": "Spontaneous, warm people who bring energy and enjoyment wherever they go.",
        "strengths": ["Boldness", "Originality", "Practicality", "People Skills"],
        "weaknesses": ["Sensitivity", "Conflict Avoidance", "Boredom", "Poor Planning"],
        "psychology": PsychologyDeepDive(
            subconscious="A vivid sensory world where every moment is a chance for joy.",
            paradox="At the centre of attention, yet private about their insecurities.",
            motivations=["Connection", "Aesthetics", "Joy"],
            fears=["Missing Out", "Loneliness", "Criticism"]),
        "career": CareerVector(title="Experience Creator", description="Bringing energy and delight to people.",
                               roles=["Performer", "Stylist", "Event Coordinator"]),
        "lifestyle": LifestyleVector(hobbies=["Dancing", "Fashion", "Parties"],
                                     environment="Bright, social and frequently refreshed.", stress_relief="Being surrounded by favourite people."),
        "work": _d("Great in teams and customer-facing roles.", ["Enthusiasm", "Service"], ["Repetition", "Focus"],
                   "Split your day into short sets of work to keep energy high."),
        "friendships": _d("Generous friends who live for the moment.", ["Warmth", "Fun"], ["Reliability", "Drama"],
                          "Listen as much as you entertain."),
        "relationships": _d("Affectionate, playful partners who value sensory romance.", ["Passion", "Attentiveness"], ["Conflict", "Commitment"],
                            "Treat disagreement as a way to know your partner better."),
        "stress": _d("Under heavy stress the inferior Introverted Intuition makes them withdrawn and anxious about the future.",
                     ["Sudden Insight"], ["Anxiety"], "Focus on a small physical project to ground yourself."),
        "growth": "Developing auxiliary Introverted Feeling (Fi) builds a sense of self that does not depend on the room.",
        "unhealthy": "Escalating reckless behaviour to avoid being ignored.",
    },
}


def _build(code: str, entry: Mapping[str, Any], source: str = "static") -> Report:
    psy = entry["psychology"]
    return Report(
        type_code=code,
        type_name=entry["type_name"],
        summary=entry["summary"],
        strengths=tuple(entry["strengths"]),
        weaknesses=tuple(entry["weaknesses"]),
        psychology=replace(psy, motivations=tuple(psy.motivations), fears=tuple(psy.fears)),
        career=replace(entry["career"], roles=tuple(entry["career"].roles)),
        lifestyle=replace(entry["lifestyle"], hobbies=tuple(entry["lifestyle"].hobbies)),
        cognitive_functions=summarize(derive_stack(code)),
        life_insights=LifeInsights(
            work=entry["work"],
            friendships=entry["friendships"],
            relationships=entry["relationships"],
            stress=entry["stress"],
            growth=entry["growth"],
            unhealthy=entry["unhealthy"],
        ),
        source=source,  # type: ignore[arg-type]
    )


PROFILES: Mapping[str, Report] = MappingProxyType({code: _build(code, entry) for code, entry in _CONTENT.items()})


def generic_report(code: str) -> Report:
    """Template report for a code missing from PROFILES, same shape as the table entries."""
    f = decompose(code)
    strength = "Analytical Rigor" if f.is_t else "Empathy"
    weakness = "Rigidity" if f.is_j else "Indecision"
    entry: Dict[str, Any] = {
        "type_name": f"The Dynamic ({code})",
        "summary": "A distinctive blend of preferences with a strong capacity to adapt.",
        "strengths": ["Adaptability", "Resilience", strength],
        "weaknesses": ["Occasional Indecision" if f.is_j else "Occasional Inconsistency", weakness],
        "psychology": PsychologyDeepDive(subconscious="Balanced", paradox="Versatile", motivations=["Growth"], fears=["Stagnation"]),
        "career": CareerVector(title="Specialist", description="An adaptable professional.", roles=["Consultant"]),
        "lifestyle": LifestyleVector(hobbies=["Various"], environment="Balanced", stress_relief="Rest"),
        "work": _d("Flexible", ["Agility"], ["Focus"], "Plan ahead."),
        "friendships": _d("Loyal", ["Empathy"], ["Boundaries"], "Communicate openly."),
        "relationships": _d("Supportive", ["Trust"], ["Conflict"], "Stay open."),
        "stress": _d("Calm", ["Resilience"], ["Overload"], "Breathe and pause."),
        "growth": "Focus on developing your auxiliary function.",
        "unhealthy": "Avoid over-relying on your dominant function.",
    }
    return _build(code, entry, source="template")


def static_report(code: str) -> Report:
    report = PROFILES.get(code)
    if report is None:
        log.warning("no static profile for %s; using template report", code)
        return generic_report(code)
    return report
